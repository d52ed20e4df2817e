"""
Tariff Defaults

Contract values for freight floors and the flat, per-kg and value-based
surcharges. These seed DEFAULT_SETTINGS; every value can be overridden at
runtime through the Settings record.
"""

# Freight
MIN_FREIGHT_AMOUNT = 350      # Floor on basic freight
AWB_CHARGE = 100              # Airway bill, every shipment

# Out of delivery area
ODA_PER_KG = 8
ODA_MIN = 1000

# Handling (by chargeable weight band)
HANDLING_BAND_START_KG = 71   # 71 - 200 kg inclusive
HANDLING_BAND_END_KG = 200    # Above this the higher rate applies
HANDLING_70_TO_200 = 3
HANDLING_ABOVE_200 = 4

# Value added services (percent of invoice value)
COD_PERCENT = 1
COD_MIN = 50
ROV_PERCENT = 0.5
ROV_MIN = 100

# Special delivery services
CSD_CHARGE = 1000
HOLIDAY_CHARGE = 1000         # Sunday / public holiday delivery
TIME_SPECIFIC_PER_KG = 3
TIME_SPECIFIC_MIN = 1500
MALL_DELIVERY_PER_KG = 3
MALL_DELIVERY_MIN = 500
REATTEMPT_PER_KG = 3
REATTEMPT_MIN = 500
