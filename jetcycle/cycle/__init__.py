"""Turbojet cycle analysis for JetCycle.

Provides component models (inlet, compressor, combustor, turbine, nozzle),
the design-point cycle solver and throttle/Mach sweep helpers.
"""
