"""
Estimator Settings

Every tunable tariff parameter lives on one immutable Settings record.
Defaults come from the reference modules in data/reference/. Callers edit
settings by building a new record (settings._replace(...) or
settings_from_dict(...)); the engine only ever reads them.

CONFIG FILE
-----------
load_settings() reads a flat JSON object of overrides, e.g.

    {"fuel_surcharge_percent": 22.5, "min_freight_amount": 400}

When no path is given, the FREIGHT_SETTINGS environment variable is checked
before falling back to the defaults.
"""

import json
import logging
import math
import os
from pathlib import Path
from typing import NamedTuple

from .data.reference import tariff
from .data.reference.billable_weight import (
    VOLUMETRIC_DIVISOR,
    MIN_CHARGEABLE_WEIGHT_KG,
    CFT_DENSITY_MIN,
)
from .data.reference.fuel import PERCENT as FUEL_PERCENT
from .data.reference.regional import PER_KG as REGIONAL_PER_KG


logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "FREIGHT_SETTINGS"


class Settings(NamedTuple):
    """Tariff parameters for one calculation."""

    # Weight
    volumetric_divisor: float = VOLUMETRIC_DIVISOR
    min_chargeable_weight: float = MIN_CHARGEABLE_WEIGHT_KG
    cft_density_min: float = CFT_DENSITY_MIN

    # Freight
    min_freight_amount: float = tariff.MIN_FREIGHT_AMOUNT
    fuel_surcharge_percent: float = FUEL_PERCENT
    awb_charge: float = tariff.AWB_CHARGE

    # Out of delivery area
    oda_per_kg: float = tariff.ODA_PER_KG
    oda_min: float = tariff.ODA_MIN

    # Handling
    handling_70_to_200: float = tariff.HANDLING_70_TO_200
    handling_above_200: float = tariff.HANDLING_ABOVE_200

    # Value added services
    cod_percent: float = tariff.COD_PERCENT
    cod_min: float = tariff.COD_MIN
    rov_percent: float = tariff.ROV_PERCENT
    rov_min: float = tariff.ROV_MIN

    # Special delivery services
    csd_charge: float = tariff.CSD_CHARGE
    holiday_charge: float = tariff.HOLIDAY_CHARGE
    time_specific_per_kg: float = tariff.TIME_SPECIFIC_PER_KG
    time_specific_min: float = tariff.TIME_SPECIFIC_MIN
    mall_delivery_per_kg: float = tariff.MALL_DELIVERY_PER_KG
    mall_delivery_min: float = tariff.MALL_DELIVERY_MIN
    reattempt_per_kg: float = tariff.REATTEMPT_PER_KG
    reattempt_min: float = tariff.REATTEMPT_MIN

    # Regional
    regional_surcharge: float = REGIONAL_PER_KG


DEFAULT_SETTINGS = Settings()


# =============================================================================
# BUILDING SETTINGS
# =============================================================================

def settings_from_dict(
    values: dict,
    base: Settings = DEFAULT_SETTINGS
) -> Settings:
    """
    Build Settings from a dict of overrides on top of `base`.

    Raises:
        ValueError: On unknown keys, non-numeric or negative values, or a
            non-positive volumetric divisor
    """
    errors = []
    overrides = {}

    for key, value in values.items():
        if key not in Settings._fields:
            errors.append(f"{key}: unknown setting")
            continue

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{key}: must be a number, got {value!r}")
            continue

        if not math.isfinite(value) or value < 0:
            errors.append(f"{key}: must be a non-negative number, got {value!r}")
            continue

        overrides[key] = float(value)

    if overrides.get("volumetric_divisor", base.volumetric_divisor) <= 0:
        errors.append("volumetric_divisor: must be greater than 0")

    if errors:
        raise ValueError("Settings errors:\n  " + "\n  ".join(errors))

    return base._replace(**overrides)


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings overrides from a JSON file.

    Args:
        path: JSON file of overrides. Falls back to $FREIGHT_SETTINGS, then
            to DEFAULT_SETTINGS when neither is set.

    Returns:
        Settings with the file's overrides applied
    """
    if path is None:
        path = os.environ.get(SETTINGS_ENV_VAR)
    if not path:
        return DEFAULT_SETTINGS

    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        values = json.load(f)

    if not isinstance(values, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    settings = settings_from_dict(values)
    logger.info("Loaded %d setting override(s) from %s", len(values), path)
    return settings


__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "SETTINGS_ENV_VAR",
    "settings_from_dict",
    "load_settings",
]
