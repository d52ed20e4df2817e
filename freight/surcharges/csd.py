"""
CSD Delivery Surcharge

Flat fee for delivery to Canteen Stores Department depots.
"""

import polars as pl
from shared.surcharges import Surcharge


class CSD(Surcharge):
    """CSD delivery - flat fee."""

    # Identity
    name = "CSD"
    line_item = "other"

    # Option
    option_flag = "is_csd"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return pl.lit(float(settings.csd_charge))
