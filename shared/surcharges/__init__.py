"""
Shared Surcharges

Base class and expression helpers for freight surcharges.
"""

from .base import Surcharge, per_kg_with_minimum, percent_with_minimum

__all__ = [
    "Surcharge",
    "per_kg_with_minimum",
    "percent_with_minimum",
]
