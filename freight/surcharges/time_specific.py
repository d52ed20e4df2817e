"""
Time Specific Delivery Surcharge

Delivery within a committed time window. Per kg with a minimum.
"""

import polars as pl
from shared.surcharges import Surcharge, per_kg_with_minimum


class TIME_SPECIFIC(Surcharge):
    """Time specific delivery."""

    # Identity
    name = "TIME_SPECIFIC"
    line_item = "other"

    # Option
    option_flag = "is_time_specific"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return per_kg_with_minimum(settings.time_specific_per_kg, settings.time_specific_min)
