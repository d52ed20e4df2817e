"""
Freight Cost Estimator

Itemized freight cost for domestic surface shipments: chargeable weight,
zone-to-zone freight, and every applicable surcharge.
"""

from .calculate_costs import calculate, calculate_costs
from .models import (
    CalculationResult,
    Dimensions,
    Location,
    ServiceabilityRecord,
    Shipment,
    ShipmentOptions,
)
from .settings import Settings, DEFAULT_SETTINGS, load_settings
from .version import VERSION
from .zones import resolve_zone, resolve_leg_zone

__all__ = [
    "calculate",
    "calculate_costs",
    "CalculationResult",
    "Dimensions",
    "Location",
    "ServiceabilityRecord",
    "Shipment",
    "ShipmentOptions",
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "VERSION",
    "resolve_zone",
    "resolve_leg_zone",
]
