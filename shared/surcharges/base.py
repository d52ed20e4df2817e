"""
Surcharge Base Class

Shared base class for all freight surcharges.
"""

from abc import ABC
import polars as pl


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def per_kg_with_minimum(
    per_kg: float,
    minimum: float,
    weight_col: str = "chargeable_weight_kg"
) -> pl.Expr:
    """
    Per-kg charge with a floor.

    Args:
        per_kg: Rate per kilogram
        minimum: Minimum charge when triggered
        weight_col: Column holding the weight basis

    Returns:
        Polars expression evaluating to max(minimum, per_kg * weight)
    """
    return pl.max_horizontal(
        pl.lit(float(minimum)),
        pl.lit(float(per_kg)) * pl.col(weight_col),
    )


def percent_with_minimum(
    percent: float,
    minimum: float,
    value_col: str = "invoice_value"
) -> pl.Expr:
    """
    Percentage of a declared value with a floor.

    Args:
        percent: Percentage (1 = 1%)
        minimum: Minimum charge when triggered
        value_col: Column holding the declared value

    Returns:
        Polars expression evaluating to max(minimum, value * percent / 100)
    """
    return pl.max_horizontal(
        pl.lit(float(minimum)),
        pl.col(value_col) * pl.lit(float(percent) / 100),
    )


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    Prices are not stored on the class. They come from the Settings record
    passed to conditions() and cost() on every calculation, so the same class
    prices correctly under any runtime configuration.

    Attributes:
        IDENTITY
            name            - Short code (e.g., "ODA", "COD")
            line_item       - Result bucket the cost rolls into
                              (e.g., "handling", "other")

        EXCLUSIVITY (for mutually exclusive surcharges)
            exclusivity_group - Group name (e.g., "handling")
            priority          - Rank within group (1 = highest, wins ties)

        OPTION
            option_flag     - Shipment option column that switches it on,
                              None for surcharges driven by shipment data
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    line_item: str

    # -------------------------------------------------------------------------
    # EXCLUSIVITY
    # -------------------------------------------------------------------------
    exclusivity_group: str | None = None
    priority: int | None = None

    # -------------------------------------------------------------------------
    # OPTION
    # -------------------------------------------------------------------------
    option_flag: str | None = None

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def flag_col(cls) -> str:
        return f"surcharge_{cls.name.lower()}"

    @classmethod
    def cost_col(cls) -> str:
        return f"cost_{cls.name.lower()}"

    @classmethod
    def conditions(cls, settings) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default triggers on the option flag when one is declared, otherwise
        always (for unconditional fees). Override for data-driven conditions.
        """
        if cls.option_flag is not None:
            return pl.col(cls.option_flag)
        return pl.lit(True)

    @classmethod
    def cost(cls, settings) -> pl.Expr:
        """Polars expression for the cost when triggered."""
        raise NotImplementedError(f"{cls.name}: cost() not implemented")
