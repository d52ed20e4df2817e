"""
Cash on Delivery Surcharge (COD)

Percentage of invoice value with a minimum.
"""

import polars as pl
from shared.surcharges import Surcharge, percent_with_minimum


class COD(Surcharge):
    """Cash on delivery."""

    # Identity
    name = "COD"
    line_item = "cod"

    # Option
    option_flag = "is_cod"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return percent_with_minimum(settings.cod_percent, settings.cod_min)
