"""
Freight Surcharges Package

Exports all surcharge classes and result groupings.

Surcharges with the same exclusivity_group compete - only the highest
priority (lowest number) wins. Every surcharge rolls into one line_item of
the CalculationResult; several surcharges may share a line item (the
handling bands, and the special services under "other").

Fuel is not a surcharge class: it is a percentage of basic freight and is
applied as its own phase in calculate_costs.py.

Usage:
    from freight.surcharges import ALL, LINE_ITEMS
"""

from shared.surcharges import Surcharge
from .awb import AWB
from .oda import ODA
from .handling import HANDLING_ABOVE_200, HANDLING_70_200
from .regional import REGIONAL
from .holiday import HOLIDAY
from .csd import CSD
from .time_specific import TIME_SPECIFIC
from .mall_delivery import MALL_DELIVERY
from .reattempt import REATTEMPT
from .cod import COD
from .rov import ROV


# All surcharges
# Note: Order matters for exclusivity groups - HANDLING_ABOVE_200 > HANDLING_70_200
ALL: list[type[Surcharge]] = [
    AWB, ODA, HANDLING_ABOVE_200, HANDLING_70_200, REGIONAL,
    HOLIDAY, CSD, TIME_SPECIFIC, MALL_DELIVERY, REATTEMPT,
    COD, ROV,
]


# Result line items fed by surcharges, in display order
LINE_ITEMS = ["awb", "oda", "handling", "regional", "other", "cod", "rov"]


# =============================================================================
# HELPERS
# =============================================================================

def get_exclusivity_group(group: str) -> list[type[Surcharge]]:
    """Get surcharges in an exclusivity group, sorted by priority (lowest first)."""
    return sorted(
        [s for s in ALL if s.exclusivity_group == group],
        key=lambda s: s.priority
    )


def get_unique_exclusivity_groups(surcharges: list) -> set[str]:
    """Get unique exclusivity group names from a list of surcharges."""
    return {s.exclusivity_group for s in surcharges if s.exclusivity_group is not None}


def get_line_item(line_item: str) -> list[type[Surcharge]]:
    """Get surcharges that roll into a result line item."""
    return [s for s in ALL if s.line_item == line_item]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_surcharges() -> None:
    """
    Validate surcharge configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    names = [s.name for s in ALL]
    errors = []

    duplicates = {n for n in names if names.count(n) > 1}
    for name in sorted(duplicates):
        errors.append(f"{name}: defined more than once in ALL")

    for s in ALL:
        # Check every surcharge lands in a known line item
        if s.line_item not in LINE_ITEMS:
            errors.append(f"{s.name}: line_item '{s.line_item}' not in LINE_ITEMS")

        # Check exclusivity_group surcharges have priority defined
        if s.exclusivity_group is not None and s.priority is None:
            errors.append(f"{s.name}: exclusivity_group '{s.exclusivity_group}' requires priority")

        # Check option flags follow the is_* column convention
        if s.option_flag is not None and not s.option_flag.startswith("is_"):
            errors.append(f"{s.name}: option_flag '{s.option_flag}' must start with 'is_'")

    if errors:
        raise ValueError("Surcharge configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_surcharges()

__all__ = [
    # Base
    "Surcharge",
    # Surcharge classes
    "AWB",
    "COD",
    "CSD",
    "HANDLING_70_200",
    "HANDLING_ABOVE_200",
    "HOLIDAY",
    "MALL_DELIVERY",
    "ODA",
    "REATTEMPT",
    "REGIONAL",
    "ROV",
    "TIME_SPECIFIC",
    # Lists
    "ALL",
    "LINE_ITEMS",
    # Helpers
    "get_exclusivity_group",
    "get_unique_exclusivity_groups",
    "get_line_item",
    "validate_surcharges",
]
