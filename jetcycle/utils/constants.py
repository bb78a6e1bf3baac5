"""Physical constants used throughout JetCycle.

All values in SI units unless otherwise noted.
"""

# Gravitational
G_0 = 9.80665  # m/s² — standard gravitational acceleration

# International Standard Atmosphere
P_ATM = 101325.0  # Pa — sea-level pressure
T_ATM = 288.15  # K — sea-level temperature (15°C)
RHO_AIR_STP = 1.225  # kg/m³ — sea-level density
R_AIR_ISA = 287.058  # J/(kg·K) — dry air, as used by the ISA tables
LAPSE_RATE_TROPOSPHERE = -0.0065  # K/m
TROPOPAUSE_ALTITUDE = 11000.0  # m
TROPOPAUSE_TEMPERATURE = 216.65  # K
TROPOPAUSE_PRESSURE = 22632.1  # Pa
ISOTHERMAL_LAYER_TOP = 20000.0  # m — upper limit of the isothermal layer

# Conversion factors
FT_TO_M = 0.3048
M_TO_FT = 1.0 / FT_TO_M
N_TO_KN = 1.0e-3
PA_TO_KPA = 1.0e-3
KG_TO_G = 1.0e3
