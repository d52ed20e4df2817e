"""
Freight Data

Reference data and loaders for rates, zones, and serviceability.

Structure:
    - reference/: Static reference data (state zones, rate matrix, tariff config)
    - loaders/: Runtime data loaders (serviceability table, pincode lookup)
"""

import logging
from functools import lru_cache

import polars as pl
from pathlib import Path

from .reference.billable_weight import (
    VOLUMETRIC_DIVISOR,
    MIN_CHARGEABLE_WEIGHT_KG,
    UNIT_CM,
    UNIT_INCH,
    CM_PER_INCH,
)
from .reference.fuel import PERCENT as FUEL_PERCENT

# Re-export loaders for convenience
from .loaders import (
    load_serviceability,
    serviceability_records,
    serviceability_frame,
    lookup_serviceability,
    ServiceabilityTableError,
    SERVICEABILITY_COLUMNS,
)


logger = logging.getLogger(__name__)

REFERENCE_DIR = Path(__file__).parent / "reference"


def load_rates(path: Path | None = None) -> pl.DataFrame:
    """
    Load the zone-to-zone rate matrix in long format, ready for joining.

    Transforms the wide CSV (zone_from, N1, N2, ...) to long format.

    Returns:
        DataFrame with columns:
            - zone_from: Origin tariff zone
            - zone_to: Destination tariff zone
            - rate: Per-kg rate for this zone pair
    """
    rates = pl.read_csv(
        path or REFERENCE_DIR / "base_rates.csv",
        schema_overrides={"zone_from": pl.Utf8},
    )
    zone_cols = [c for c in rates.columns if c != "zone_from"]

    return (
        rates
        .unpivot(
            index="zone_from",
            on=zone_cols,
            variable_name="zone_to",
            value_name="rate",
        )
        .with_columns(pl.col("rate").cast(pl.Float64))
        .filter(pl.col("rate").is_not_null())
    )


def load_zones(path: Path | None = None) -> pl.DataFrame:
    """
    Load state-to-zone mappings from CSV.

    State names are normalized (lowercase, trimmed) on load so lookups only
    need to normalize the query side.

    Returns:
        DataFrame with columns: state, zone
    """
    zones = pl.read_csv(
        path or REFERENCE_DIR / "state_zones.csv",
        schema_overrides={"state": pl.Utf8, "zone": pl.Utf8},
    )
    return (
        zones
        .with_columns(pl.col("state").str.strip_chars().str.to_lowercase())
        .unique(subset="state", keep="last", maintain_order=True)
    )


@lru_cache(maxsize=1)
def default_rates() -> pl.DataFrame:
    """Bundled rate matrix, read once per process."""
    return load_rates()


@lru_cache(maxsize=1)
def default_zones() -> pl.DataFrame:
    """Bundled state -> zone mapping, read once per process."""
    return load_zones()


def find_missing_rates(
    rates: pl.DataFrame | None = None,
    zones: pl.DataFrame | None = None
) -> list[tuple[str, str]]:
    """
    List zone pairs that have no rate in the rate matrix.

    Every zone reachable through the zone map must be priced against every
    other one. A gap is not fatal (the engine prices it at 0 and falls back
    to the minimum freight), but it is a data defect.

    Returns:
        Sorted list of (zone_from, zone_to) tuples without a rate
    """
    if rates is None:
        rates = default_rates()
    if zones is None:
        zones = default_zones()

    zone_codes = zones.select(pl.col("zone").unique().sort())
    pairs = zone_codes.rename({"zone": "zone_from"}).join(
        zone_codes.rename({"zone": "zone_to"}), how="cross"
    )
    missing = pairs.join(
        rates.select(["zone_from", "zone_to"]),
        on=["zone_from", "zone_to"],
        how="anti",
    )

    result = sorted(missing.iter_rows())
    if result:
        logger.warning("Rate matrix is missing %d zone pair(s)", len(result))
    return result


__all__ = [
    # Reference data loaders
    "load_rates",
    "load_zones",
    "default_rates",
    "default_zones",
    "find_missing_rates",
    "REFERENCE_DIR",
    # Serviceability loaders
    "load_serviceability",
    "serviceability_records",
    "serviceability_frame",
    "lookup_serviceability",
    "ServiceabilityTableError",
    "SERVICEABILITY_COLUMNS",
    # Chargeable weight config
    "VOLUMETRIC_DIVISOR",
    "MIN_CHARGEABLE_WEIGHT_KG",
    "UNIT_CM",
    "UNIT_INCH",
    "CM_PER_INCH",
    # Fuel config
    "FUEL_PERCENT",
]
