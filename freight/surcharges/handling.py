"""
Handling Surcharges

Heavy-piece handling, tiered on chargeable weight (not dead weight):

    chargeable weight       rate
    ---------------------   --------------------
    up to 70 kg             none
    71 - 200 kg             handling_70_to_200 / kg
    over 200 kg             handling_above_200 / kg

The bands are mutually exclusive and the whole weight is charged at the
band's rate. Weights between 70 and 71 kg fall in neither band.
"""

import polars as pl
from shared.surcharges import Surcharge

from ..data.reference.tariff import HANDLING_BAND_START_KG, HANDLING_BAND_END_KG


class HANDLING_ABOVE_200(Surcharge):
    """Handling - chargeable weight over 200 kg."""

    # Identity
    name = "HANDLING_ABOVE_200"
    line_item = "handling"

    # Exclusivity (handling: ABOVE_200 > 70_200)
    exclusivity_group = "handling"
    priority = 1

    @classmethod
    def conditions(cls, settings) -> pl.Expr:
        return pl.col("chargeable_weight_kg") > HANDLING_BAND_END_KG

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return pl.lit(float(settings.handling_above_200)) * pl.col("chargeable_weight_kg")


class HANDLING_70_200(Surcharge):
    """Handling - chargeable weight 71 to 200 kg inclusive."""

    # Identity
    name = "HANDLING_70_200"
    line_item = "handling"

    # Exclusivity (handling: ABOVE_200 > 70_200)
    exclusivity_group = "handling"
    priority = 2

    @classmethod
    def conditions(cls, settings) -> pl.Expr:
        return (
            (pl.col("chargeable_weight_kg") >= HANDLING_BAND_START_KG) &
            (pl.col("chargeable_weight_kg") <= HANDLING_BAND_END_KG)
        )

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        return pl.lit(float(settings.handling_70_to_200)) * pl.col("chargeable_weight_kg")
