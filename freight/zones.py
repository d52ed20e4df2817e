"""
Zone Resolver

Maps a destination or origin to its tariff zone.

    1. Serviceability override - a non-empty zone on the pincode's
       serviceability record wins
    2. State mapping - normalized (lowercase, trimmed) exact match
       against data/reference/state_zones.csv

An unmapped state is not an error: it resolves to None, and the caller
must treat the shipment as having insufficient data.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

import polars as pl

from .data import default_zones
from .models import Location, ServiceabilityRecord


@lru_cache(maxsize=1)
def default_zone_map() -> Mapping[str, str]:
    """Read-only state -> zone mapping from the bundled reference CSV."""
    return zone_map_from_frame(default_zones())


def zone_map_from_frame(zones: pl.DataFrame) -> Mapping[str, str]:
    """Read-only state -> zone mapping from a zones DataFrame."""
    return MappingProxyType(dict(zones.select(["state", "zone"]).iter_rows()))


def normalize_state(state_name: str | None) -> str:
    return (state_name or "").strip().lower()


def resolve_zone(
    state_name: str | None,
    zone_map: Mapping[str, str] | None = None
) -> str | None:
    """
    Resolve a state name to its tariff zone.

    Returns:
        Zone code, or None if the state is empty or unmapped
    """
    normalized = normalize_state(state_name)
    if not normalized:
        return None
    if zone_map is None:
        zone_map = default_zone_map()
    return zone_map.get(normalized)


def resolve_leg_zone(
    location: Location,
    record: ServiceabilityRecord | None = None,
    zone_map: Mapping[str, str] | None = None
) -> str | None:
    """
    Resolve the zone for one leg, honouring a serviceability override.

    Args:
        location: Pickup or drop location
        record: Serviceability record for the location's exact pincode
        zone_map: State -> zone mapping (bundled reference data if None)
    """
    if record is not None:
        zone = (record.zone or "").strip()
        if zone:
            return zone
    return resolve_zone(location.state, zone_map)


def normalized_state_expr(state_col: str) -> pl.Expr:
    """Polars expression normalizing a state column for zone joins."""
    return (
        pl.col(state_col)
        .cast(pl.Utf8)
        .fill_null("")
        .str.strip_chars()
        .str.to_lowercase()
    )


__all__ = [
    "default_zone_map",
    "zone_map_from_frame",
    "normalize_state",
    "resolve_zone",
    "resolve_leg_zone",
    "normalized_state_expr",
]
