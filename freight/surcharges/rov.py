"""
Risk of Value Surcharge (ROV)

Carrier-risk cover on the declared invoice value. Percentage of invoice
value with a minimum.
"""

import polars as pl
from shared.surcharges import Surcharge, percent_with_minimum


class ROV(Surcharge):
    """Carrier risk cover."""

    # Identity
    name = "ROV"
    line_item = "rov"

    # Option
    option_flag = "is_rov"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return percent_with_minimum(settings.rov_percent, settings.rov_min)
