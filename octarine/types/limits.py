# No dependencies
CHANNEL_MAX = 255
HUE_360 = 360.0
HEX_MASK = 0xFFFFFF
HEX_DIGITS = 6

# Hue sector width used by the HSL/HSV formulas
HUE_SECTOR = 60.0

# Step range, in degrees, for ColorWheel hue advances
WHEEL_STEP_MIN = 36.0
WHEEL_STEP_MAX = 72.0
WHEEL_SATURATION = 1.0
WHEEL_VALUE = 0.8
