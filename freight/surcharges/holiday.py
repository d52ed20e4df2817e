"""
Holiday Delivery Surcharge

Flat fee for Sunday or public holiday delivery.
"""

import polars as pl
from shared.surcharges import Surcharge


class HOLIDAY(Surcharge):
    """Holiday / Sunday delivery - flat fee."""

    # Identity
    name = "HOLIDAY"
    line_item = "other"

    # Option
    option_flag = "is_holiday"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return pl.lit(float(settings.holiday_charge))
