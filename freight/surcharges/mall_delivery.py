"""
Mall Delivery Surcharge

Delivery into shopping malls (restricted receiving hours and docks).
Per kg with a minimum.
"""

import polars as pl
from shared.surcharges import Surcharge, per_kg_with_minimum


class MALL_DELIVERY(Surcharge):
    """Mall delivery."""

    # Identity
    name = "MALL_DELIVERY"
    line_item = "other"

    # Option
    option_flag = "is_mall_delivery"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return per_kg_with_minimum(settings.mall_delivery_per_kg, settings.mall_delivery_min)
