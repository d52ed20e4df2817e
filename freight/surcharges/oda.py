"""
Out of Delivery Area Surcharge (ODA)

Applies when either leg is outside the carrier's serviceable network:
  - Pickup pincode missing from the serviceability table, or pickup not available
  - Drop pincode missing from the serviceability table, or delivery not available

With no serviceability table loaded, nothing is ever ODA. The is_oda column
is populated by _add_oda_flags() in calculate_costs.py.

Charged per kg of chargeable weight with a minimum.
"""

import polars as pl
from shared.surcharges import Surcharge, per_kg_with_minimum


class ODA(Surcharge):
    """Out of delivery area - either leg not serviceable."""

    # Identity
    name = "ODA"
    line_item = "oda"

    @classmethod
    def conditions(cls, settings) -> pl.Expr:
        return pl.col("is_oda")

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return per_kg_with_minimum(settings.oda_per_kg, settings.oda_min)
