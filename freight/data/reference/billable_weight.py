"""
Chargeable Weight Configuration

Surface freight bills on the greatest of dead weight, volumetric weight and
a contractual minimum.

HOW CHARGEABLE WEIGHT WORKS
---------------------------
    volumetric_weight_kg = (length_cm * breadth_cm * height_cm) / VOLUMETRIC_DIVISOR
    chargeable_weight_kg = max(weight_kg, volumetric_weight_kg, MIN_CHARGEABLE_WEIGHT_KG)

Chargeable weight is rounded to 2 decimals before any rate is applied.
"""

VOLUMETRIC_DIVISOR = 4500       # Cubic centimetres per kilogram
MIN_CHARGEABLE_WEIGHT_KG = 20   # Contract minimum
CFT_DENSITY_MIN = 7             # Published with the contract, not applied

# Dimension units accepted on input
UNIT_CM = "cm"
UNIT_INCH = "inch"
CM_PER_INCH = 2.54
