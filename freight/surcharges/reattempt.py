"""
Re-attempt Surcharge

Second delivery attempt after a failed first attempt. Per kg with a minimum.
"""

import polars as pl
from shared.surcharges import Surcharge, per_kg_with_minimum


class REATTEMPT(Surcharge):
    """Delivery re-attempt."""

    # Identity
    name = "REATTEMPT"
    line_item = "other"

    # Option
    option_flag = "is_reattempt"

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return per_kg_with_minimum(settings.reattempt_per_kg, settings.reattempt_min)
