"""
Freight Data Loaders

Runtime loaders for the serviceability table and pincode lookups.
"""

from .serviceability import (
    load_serviceability,
    serviceability_records,
    serviceability_frame,
    lookup_serviceability,
    ServiceabilityTableError,
    SERVICEABILITY_COLUMNS,
)
from .pincode_lookup import (
    PincodeLookup,
    ServiceabilityPincodeLookup,
    DebouncedPincodeLookup,
)

__all__ = [
    "load_serviceability",
    "serviceability_records",
    "serviceability_frame",
    "lookup_serviceability",
    "ServiceabilityTableError",
    "SERVICEABILITY_COLUMNS",
    "PincodeLookup",
    "ServiceabilityPincodeLookup",
    "DebouncedPincodeLookup",
]
