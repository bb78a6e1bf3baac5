"""JetCycle: steady-state turbojet cycle analysis.

Station-by-station thermodynamic model of a single-spool turbojet with an
ISA ambient model, throttle sweeps and a command-line front end.
"""

__app_name__ = "JetCycle"
__version__ = "0.1.0"
