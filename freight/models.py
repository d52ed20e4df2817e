"""
Freight Records

Immutable inputs and outputs of the estimator. Raw numeric fields on
Shipment and Dimensions may hold user-typed strings; the engine coerces
anything unparseable to 0.
"""

from typing import NamedTuple


class Location(NamedTuple):
    """One leg of a shipment (pickup or drop)."""
    pincode: str = ""
    city: str = ""
    state: str = ""


class Dimensions(NamedTuple):
    """Package dimensions in `unit` ("cm" or "inch")."""
    length: float | str | None = 0
    breadth: float | str | None = 0
    height: float | str | None = 0
    unit: str = "cm"


class Shipment(NamedTuple):
    """Physical and declared properties of the package."""
    weight: float | str | None = 0          # Dead weight, kg
    invoice_value: float | str | None = 0   # Declared value for COD / ROV
    dimensions: Dimensions = Dimensions()


class ShipmentOptions(NamedTuple):
    """Independent service toggles. Each active one adds its own charge."""
    cod: bool = False
    rov: bool = False
    csd: bool = False
    mall_delivery: bool = False
    time_specific: bool = False
    holiday: bool = False
    reattempt: bool = False


class ServiceabilityRecord(NamedTuple):
    """Carrier serviceability for a single pincode."""
    pickup_available: bool = True
    delivery_available: bool = True
    zone: str = ""
    city: str = ""
    state: str = ""


class CalculationResult(NamedTuple):
    """
    Itemized cost for one shipment.

    Line items are rounded to 2 decimals individually. total_cost is the
    unrounded sum of the nine line items rounded half-up to a whole unit.
    """
    volumetric_weight: float
    dead_weight: float
    chargeable_weight: float
    zone_from: str
    zone_to: str
    base_rate: float
    freight_charge: float
    fuel_surcharge: float
    awb_charge: float
    oda_charge: float
    handling_charge: float
    regional_charge: float
    other_surcharges: float
    cod_charge: float
    rov_charge: float
    total_cost: int
    is_oda: bool
    pickup_oda: bool
    delivery_oda: bool
    warnings: tuple[str, ...] = ()


# Option flag columns in the DataFrame pipeline, keyed by ShipmentOptions field
OPTION_COLUMNS = {
    "cod": "is_cod",
    "rov": "is_rov",
    "csd": "is_csd",
    "mall_delivery": "is_mall_delivery",
    "time_specific": "is_time_specific",
    "holiday": "is_holiday",
    "reattempt": "is_reattempt",
}


__all__ = [
    "Location",
    "Dimensions",
    "Shipment",
    "ShipmentOptions",
    "ServiceabilityRecord",
    "CalculationResult",
    "OPTION_COLUMNS",
]
