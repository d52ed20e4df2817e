"""
Reference Data

Static reference data for tariff zones, rates, and contract defaults.
"""

from . import tariff
from .billable_weight import (
    VOLUMETRIC_DIVISOR,
    MIN_CHARGEABLE_WEIGHT_KG,
    CFT_DENSITY_MIN,
    UNIT_CM,
    UNIT_INCH,
    CM_PER_INCH,
)
from .fuel import PERCENT as FUEL_PERCENT, APPLICATION as FUEL_APPLICATION
from .regional import (
    PER_KG as REGIONAL_PER_KG,
    REGIONAL_STATES,
    NORTH_EAST_ZONE,
    EXEMPT_CITY,
    EXEMPT_PINCODE_PREFIX,
)

__all__ = [
    "tariff",
    "VOLUMETRIC_DIVISOR",
    "MIN_CHARGEABLE_WEIGHT_KG",
    "CFT_DENSITY_MIN",
    "UNIT_CM",
    "UNIT_INCH",
    "CM_PER_INCH",
    "FUEL_PERCENT",
    "FUEL_APPLICATION",
    "REGIONAL_PER_KG",
    "REGIONAL_STATES",
    "NORTH_EAST_ZONE",
    "EXEMPT_CITY",
    "EXEMPT_PINCODE_PREFIX",
]
