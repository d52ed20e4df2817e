"""
Airway Bill Charge (AWB)

Flat documentation fee on every shipment.
"""

import polars as pl
from shared.surcharges import Surcharge


class AWB(Surcharge):
    """Airway bill - unconditional flat fee."""

    # Identity
    name = "AWB"
    line_item = "awb"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return pl.lit(float(settings.awb_charge))
