"""Core modules for JetCycle.

- atmosphere: two-layer International Standard Atmosphere
- config: run records (JSON) and throttle schedule loading
"""
