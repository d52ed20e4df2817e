"""
Regional Surcharge

Per-kg surcharge for hard-to-reach destinations. Triggers when:
  1. Destination state is Jammu & Kashmir or Himachal Pradesh, or
  2. Destination state maps to the north-east zone, unless the destination
     is Guwahati (city contains "guwahati" or pincode starts with 781)

Rule 2 uses the state-derived zone (drop_state_zone), not a serviceability
zone override.
"""

import polars as pl
from shared.surcharges import Surcharge

from ..data.reference.regional import (
    REGIONAL_STATES,
    NORTH_EAST_ZONE,
    EXEMPT_CITY,
    EXEMPT_PINCODE_PREFIX,
)


class REGIONAL(Surcharge):
    """Regional - J&K, Himachal, and north-east outside Guwahati."""

    # Identity
    name = "REGIONAL"
    line_item = "regional"

    @classmethod
    def is_exempt_city(cls) -> pl.Expr:
        """Guwahati, matched loosely on city name or pincode prefix."""
        return (
            pl.col("drop_city").str.to_lowercase().str.contains(EXEMPT_CITY, literal=True) |
            pl.col("drop_pincode").str.starts_with(EXEMPT_PINCODE_PREFIX)
        )

    @classmethod
    def conditions(cls, settings) -> pl.Expr:
        return (
            pl.col("drop_state_norm").is_in(REGIONAL_STATES) |
            (
                (pl.col("drop_state_zone") == NORTH_EAST_ZONE).fill_null(False) &
                ~cls.is_exempt_city()
            )
        )

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return pl.lit(float(settings.regional_surcharge)) * pl.col("chargeable_weight_kg")
