"""
Bench Calculator Station - Configuration
"""

# Resistor network
DEFAULT_RESISTOR_VALUE = 100.0   # New rows start at 100 Ω
DEFAULT_SOURCE_VALUE   = 10.0    # Volts (series) or amps (parallel)

# Write-back precision (decimal places) per solver
DIVIDER_DECIMALS   = 3
OHMS_LAW_DECIMALS  = 4
RC_FIELD_DECIMALS  = 2
RC_TIME_DECIMALS   = 3
RC_TARGET_DECIMALS = 3

# Vin ≈ Vout guard for the voltage divider Ra solve
EQUALITY_EPSILON = 1e-6

# RC charging curve: 30 steps over 5τ (≈ 99.3 % charged) → 31 points
CHARGE_CURVE_STEPS = 30
CHARGE_CURVE_SPAN  = 5.0

# Battery life
DEFAULT_CAPACITY_MAH   = 2000.0
DEFAULT_LOAD_MA        = 100.0
DEFAULT_EFFICIENCY     = 0.85
EFFICIENCY_MIN         = 0.5
EFFICIENCY_MAX         = 1.0

# Color code: tolerance shown when the tolerance band has no value
DEFAULT_TOLERANCE_PCT = 20.0

# Chart surface
SCREEN_W = 480
SCREEN_H = 320
