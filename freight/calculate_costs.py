"""
Freight Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (CSV upload,
form submission, manual creation) as long as it contains the required
columns. The output is the same DataFrame with calculation columns and costs
appended. calculate() wraps the pipeline for a single shipment and returns a
CalculationResult.

The calculation is pure: the bundled reference data is read once per
process when zones/rates are not supplied, and no state is kept between
calls.

REQUIRED INPUT COLUMNS
----------------------
    pickup_pincode      - Origin pincode
    pickup_city         - Origin city
    pickup_state        - Origin state (zone lookup)
    drop_pincode        - Destination pincode
    drop_city           - Destination city (regional exemption)
    drop_state          - Destination state (zone lookup, regional surcharge)
    weight_kg           - Dead weight in kg (strings accepted, junk becomes 0)
    invoice_value       - Declared value for COD / ROV
    length, breadth, height - Package dimensions

OPTIONAL INPUT COLUMNS
----------------------
    dim_unit            - "cm" (default) or "inch"
    is_cod, is_rov, is_csd, is_mall_delivery,
    is_time_specific, is_holiday, is_reattempt - Service options (default False)

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - length_cm, breadth_cm, height_cm, volume_cm3
        - volumetric_weight_kg, chargeable_weight_kg, weight_basis
        - pickup_state_zone, drop_state_zone, drop_state_norm
        - zone_from, zone_to, zone_resolved
        - pickup_oda, delivery_oda, is_oda

    calculate_charges() adds:
        - base_rate, rate_found
        - surcharge_* flags, cost_* amounts (unrounded)
        - cost_freight, cost_fuel, cost_subtotal
        - charge_* line items (rounded to 2 decimals)
        - cost_total (whole currency units)
        - calculator_version

    Rows with zone_resolved = False keep null cost and charge columns.

USAGE
-----
    from freight.calculate_costs import calculate_costs
    result = calculate_costs(df)

    from freight.calculate_costs import calculate
    result = calculate(pickup, drop, shipment, settings, options)
"""

import logging
from typing import Mapping

import polars as pl

from .version import VERSION
from .data import (
    default_rates,
    default_zones,
    CM_PER_INCH,
    UNIT_CM,
    UNIT_INCH,
)
from .data.loaders.serviceability import serviceability_frame
from .models import (
    CalculationResult,
    Location,
    ServiceabilityRecord,
    Shipment,
    ShipmentOptions,
    OPTION_COLUMNS,
)
from .settings import Settings, DEFAULT_SETTINGS
from .surcharges import (
    ALL,
    LINE_ITEMS,
    get_exclusivity_group,
    get_line_item,
    get_unique_exclusivity_groups,
)
from .zones import normalized_state_expr


logger = logging.getLogger(__name__)

TEXT_INPUT_COLS = [
    "pickup_pincode",
    "pickup_city",
    "pickup_state",
    "drop_pincode",
    "drop_city",
    "drop_state",
]

NUMERIC_INPUT_COLS = [
    "weight_kg",
    "invoice_value",
    "length",
    "breadth",
    "height",
]

REQUIRED_INPUT_COLS = TEXT_INPUT_COLS + NUMERIC_INPUT_COLS

OPTION_FLAG_COLS = list(OPTION_COLUMNS.values())

# Text option values read as "on" (spreadsheet exports)
FLAG_TRUE_VALUES = ["Y", "YES", "TRUE", "1"]

# Exact ties round up, matching the published rate calculator
ROUND_MODE = "half_away_from_zero"

# Result line items in summation order: freight and fuel, then surcharge buckets
RESULT_LINE_ITEMS = ["freight", "fuel"] + LINE_ITEMS


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    settings: Settings | None = None,
    serviceability: pl.DataFrame | Mapping[str, ServiceabilityRecord] | None = None,
    zones: pl.DataFrame | None = None,
    rates: pl.DataFrame | None = None,
) -> pl.DataFrame:
    """
    Calculate freight costs for a shipment DataFrame.

    This is the main entry point. Takes raw shipment data and returns
    the same DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw shipment DataFrame with required columns (see module docstring)
        settings: Tariff settings (DEFAULT_SETTINGS if not provided)
        serviceability: Serviceability table or pincode -> record mapping.
            None means no table is loaded, so nothing is ever ODA.
        zones: State -> zone DataFrame (bundled state_zones.csv if not provided)
        rates: Long-format rate matrix (bundled base_rates.csv if not provided)

    Returns:
        DataFrame with supplemented data, surcharge flags, and costs
    """
    df = supplement_shipments(df, settings, serviceability, zones)
    df = calculate_charges(df, settings, rates)
    return df


def calculate(
    pickup: Location,
    drop: Location,
    shipment: Shipment,
    settings: Settings | None = None,
    options: ShipmentOptions | None = None,
    serviceability: pl.DataFrame | Mapping[str, ServiceabilityRecord] | None = None,
    zones: pl.DataFrame | None = None,
    rates: pl.DataFrame | None = None,
) -> CalculationResult | None:
    """
    Calculate the itemized cost of a single shipment.

    Returns:
        CalculationResult, or None when either state is missing or either
        zone cannot be resolved (insufficient data, not a zero-cost quote)
    """
    df = shipment_frame(pickup, drop, shipment, options)
    df = calculate_costs(df, settings, serviceability, zones, rates)

    row = df.with_columns(
        pl.col("volumetric_weight_kg").round(2, mode=ROUND_MODE)
    ).row(0, named=True)
    if not row["zone_resolved"]:
        logger.debug(
            "Zone indeterminate for %r -> %r", pickup.state, drop.state
        )
        return None

    return _to_result(row)


def shipment_frame(
    pickup: Location,
    drop: Location,
    shipment: Shipment,
    options: ShipmentOptions | None = None,
) -> pl.DataFrame:
    """Create a single-row pipeline DataFrame from shipment records."""
    if options is None:
        options = ShipmentOptions()

    dims = shipment.dimensions
    row = {
        "pickup_pincode": pickup.pincode,
        "pickup_city": pickup.city,
        "pickup_state": pickup.state,
        "drop_pincode": drop.pincode,
        "drop_city": drop.city,
        "drop_state": drop.state,
        "weight_kg": _raw_number(shipment.weight),
        "invoice_value": _raw_number(shipment.invoice_value),
        "length": _raw_number(dims.length),
        "breadth": _raw_number(dims.breadth),
        "height": _raw_number(dims.height),
        "dim_unit": dims.unit,
    }
    for field, col in OPTION_COLUMNS.items():
        row[col] = bool(getattr(options, field))

    schema = {col: pl.Utf8 for col in REQUIRED_INPUT_COLS + ["dim_unit"]}
    schema.update({col: pl.Boolean for col in OPTION_FLAG_COLS})

    return pl.DataFrame([row], schema=schema)


def _raw_number(value) -> str | None:
    """Raw form value as text; coercion happens in the pipeline."""
    if value is None:
        return None
    return str(value)


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(
    df: pl.DataFrame,
    settings: Settings | None = None,
    serviceability: pl.DataFrame | Mapping[str, ServiceabilityRecord] | None = None,
    zones: pl.DataFrame | None = None,
) -> pl.DataFrame:
    """
    Supplement shipment data with weight, zone, and serviceability data.

    Args:
        df: Raw shipment DataFrame
        settings: Tariff settings (DEFAULT_SETTINGS if not provided)
        serviceability: Serviceability table, mapping, or None
        zones: Zone mapping DataFrame (loaded if not provided)

    Returns:
        DataFrame with added columns:
            - length_cm, breadth_cm, height_cm, volume_cm3
            - volumetric_weight_kg, chargeable_weight_kg, weight_basis
            - pickup_state_zone, drop_state_zone, drop_state_norm
            - zone_from, zone_to, zone_resolved
            - pickup_oda, delivery_oda, is_oda
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    if zones is None:
        zones = default_zones()
    if isinstance(serviceability, Mapping):
        serviceability = serviceability_frame(serviceability)

    _validate_columns(df)

    df = _normalize_inputs(df)
    df = _add_calculated_dimensions(df)
    df = _add_chargeable_weight(df, settings)

    df = df.with_row_index("_row_id")
    df = _lookup_state_zones(df, zones)
    df = _lookup_serviceability(df, serviceability)
    df = df.sort("_row_id").drop("_row_id")

    df = _resolve_zones(df)
    df = _add_oda_flags(df, serviceability is not None)
    df = _drop_serviceability_columns(df)

    logger.debug("Supplemented %d shipment(s)", len(df))
    return df


def _validate_columns(df: pl.DataFrame) -> None:
    """Raise if any required input column is missing."""
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required input column(s): {', '.join(missing)}")


def _to_number(df: pl.DataFrame, col: str) -> pl.Expr:
    """
    Coerce a raw input column to Float64.

    Empty, non-numeric, NaN and infinite values become 0 so a half-filled
    form still produces a quote.
    """
    if df.schema[col].is_numeric():
        value = pl.col(col).cast(pl.Float64)
    else:
        value = (
            pl.col(col)
            .cast(pl.Utf8)
            .str.strip_chars()
            .cast(pl.Float64, strict=False)
        )
    return pl.when(value.is_finite()).then(value).otherwise(pl.lit(0.0)).alias(col)


def _normalize_inputs(df: pl.DataFrame) -> pl.DataFrame:
    """Clean text, coerce numbers, and default optional columns."""
    df = df.with_columns(
        [
            pl.col(c).cast(pl.Utf8).fill_null("").str.strip_chars().alias(c)
            for c in TEXT_INPUT_COLS
        ] + [
            _to_number(df, c) for c in NUMERIC_INPUT_COLS
        ]
    )

    if "dim_unit" in df.columns:
        df = df.with_columns(
            pl.col("dim_unit").cast(pl.Utf8).fill_null(UNIT_CM)
            .str.strip_chars().str.to_lowercase().alias("dim_unit")
        )
    else:
        df = df.with_columns(pl.lit(UNIT_CM).alias("dim_unit"))

    return df.with_columns([
        _to_flag(df, c) if c in df.columns else pl.lit(False).alias(c)
        for c in OPTION_FLAG_COLS
    ])


def _to_flag(df: pl.DataFrame, col: str) -> pl.Expr:
    """
    Coerce a raw option column to Boolean.

    Text columns are on only for FLAG_TRUE_VALUES (case-insensitive), so
    "Y", "true" and "1" from a spreadsheet work and anything else is off.
    """
    dtype = df.schema[col]
    if dtype == pl.Boolean:
        value = pl.col(col)
    elif dtype == pl.String:
        value = (
            pl.col(col)
            .str.strip_chars()
            .str.to_uppercase()
            .is_in(FLAG_TRUE_VALUES)
        )
    elif dtype.is_numeric():
        value = pl.col(col) != 0
    else:
        value = pl.col(col).cast(pl.Boolean, strict=False)
    return value.fill_null(False).alias(col)


def _add_calculated_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Convert dimensions to centimetres and add volume."""
    factor = (
        pl.when(pl.col("dim_unit") == UNIT_INCH)
        .then(pl.lit(CM_PER_INCH))
        .otherwise(pl.lit(1.0))
    )

    df = df.with_columns([
        (pl.col("length") * factor).alias("length_cm"),
        (pl.col("breadth") * factor).alias("breadth_cm"),
        (pl.col("height") * factor).alias("height_cm"),
    ])

    return df.with_columns(
        (pl.col("length_cm") * pl.col("breadth_cm") * pl.col("height_cm"))
        .alias("volume_cm3")
    )


def _add_chargeable_weight(df: pl.DataFrame, settings: Settings) -> pl.DataFrame:
    """
    Calculate volumetric weight and chargeable weight.

    Chargeable weight is the greatest of dead weight, volumetric weight and
    the configured minimum, rounded to 2 decimals. Volumetric weight is 0
    unless every dimension is positive.
    """
    divisor = float(settings.volumetric_divisor)
    minimum = float(settings.min_chargeable_weight)

    all_dims_positive = (
        (pl.col("length_cm") > 0) &
        (pl.col("breadth_cm") > 0) &
        (pl.col("height_cm") > 0)
    )

    if divisor > 0:
        volumetric = (
            pl.when(all_dims_positive)
            .then(pl.col("volume_cm3") / divisor)
            .otherwise(pl.lit(0.0))
        )
    else:
        logger.warning("Non-positive volumetric divisor %s, volumetric weight ignored", divisor)
        volumetric = pl.lit(0.0)

    df = df.with_columns(volumetric.alias("volumetric_weight_kg"))

    return df.with_columns([
        pl.max_horizontal("weight_kg", "volumetric_weight_kg", pl.lit(minimum))
        .round(2, mode=ROUND_MODE)
        .alias("chargeable_weight_kg"),

        pl.when(pl.lit(minimum) > pl.max_horizontal("weight_kg", "volumetric_weight_kg"))
        .then(pl.lit("minimum"))
        .when(pl.col("volumetric_weight_kg") > pl.col("weight_kg"))
        .then(pl.lit("volumetric"))
        .otherwise(pl.lit("dead"))
        .alias("weight_basis"),
    ])


def _lookup_state_zones(df: pl.DataFrame, zones: pl.DataFrame) -> pl.DataFrame:
    """
    Add state-derived zones for both legs.

    Joins on the normalized (lowercase, trimmed) state name. Unmapped states
    get a null zone.
    """
    zones = zones.select([
        normalized_state_expr("state").alias("_state"),
        pl.col("zone").cast(pl.Utf8),
    ]).unique(subset="_state", keep="last")

    df = df.with_columns([
        normalized_state_expr("pickup_state").alias("pickup_state_norm"),
        normalized_state_expr("drop_state").alias("drop_state_norm"),
    ])

    df = df.join(
        zones.rename({"_state": "pickup_state_norm", "zone": "pickup_state_zone"}),
        on="pickup_state_norm",
        how="left",
    )
    df = df.join(
        zones.rename({"_state": "drop_state_norm", "zone": "drop_state_zone"}),
        on="drop_state_norm",
        how="left",
    )

    return df.drop("pickup_state_norm")


def _lookup_serviceability(
    df: pl.DataFrame,
    serviceability: pl.DataFrame | None
) -> pl.DataFrame:
    """
    Join serviceability records onto both legs by exact pincode.

    Adds temporary _pickup_svc_* / _drop_svc_* columns consumed by
    _resolve_zones() and _add_oda_flags().
    """
    if serviceability is None:
        return df.with_columns([
            pl.lit(None, dtype=pl.Utf8).alias("_pickup_svc_zone"),
            pl.lit(None, dtype=pl.Utf8).alias("_drop_svc_zone"),
            pl.lit(None, dtype=pl.Boolean).alias("_pickup_svc_available"),
            pl.lit(None, dtype=pl.Boolean).alias("_drop_svc_available"),
        ])

    svc = serviceability.select([
        pl.col("pincode").cast(pl.Utf8),
        pl.col("pickup_available").cast(pl.Boolean),
        pl.col("delivery_available").cast(pl.Boolean),
        pl.col("zone").cast(pl.Utf8),
    ]).unique(subset="pincode", keep="last")

    df = df.join(
        svc.select([
            pl.col("pincode").alias("pickup_pincode"),
            pl.col("pickup_available").alias("_pickup_svc_available"),
            pl.col("zone").alias("_pickup_svc_zone"),
        ]),
        on="pickup_pincode",
        how="left",
    )
    df = df.join(
        svc.select([
            pl.col("pincode").alias("drop_pincode"),
            pl.col("delivery_available").alias("_drop_svc_available"),
            pl.col("zone").alias("_drop_svc_zone"),
        ]),
        on="drop_pincode",
        how="left",
    )

    return df


def _resolve_zones(df: pl.DataFrame) -> pl.DataFrame:
    """
    Resolve the billing zone for both legs.

    TWO-TIER RESOLUTION
    -------------------
    1. Non-empty zone on the pincode's serviceability record
    2. State-derived zone

    A shipment is resolved only if both states are filled in and both legs
    have a zone.
    """
    def leg_zone(leg: str) -> pl.Expr:
        override = pl.col(f"_{leg}_svc_zone").str.strip_chars()
        return (
            pl.when(override.is_not_null() & (override != ""))
            .then(override)
            .otherwise(pl.col(f"{leg}_state_zone"))
        )

    df = df.with_columns([
        leg_zone("pickup").alias("zone_from"),
        leg_zone("drop").alias("zone_to"),
    ])

    return df.with_columns(
        (
            (pl.col("pickup_state") != "") &
            (pl.col("drop_state") != "") &
            pl.col("zone_from").is_not_null() &
            pl.col("zone_to").is_not_null()
        ).alias("zone_resolved")
    )


def _add_oda_flags(df: pl.DataFrame, has_serviceability: bool) -> pl.DataFrame:
    """
    Flag out-of-delivery-area legs.

    A leg is ODA when its pincode has no serviceability record or the record
    says the service (pickup for origin, delivery for destination) is not
    available. Without a serviceability table, no leg is ODA: missing data
    is not the same as a known gap in coverage.
    """
    if not has_serviceability:
        df = df.with_columns([
            pl.lit(False).alias("pickup_oda"),
            pl.lit(False).alias("delivery_oda"),
        ])
    else:
        df = df.with_columns([
            (~pl.col("_pickup_svc_available").fill_null(False)).alias("pickup_oda"),
            (~pl.col("_drop_svc_available").fill_null(False)).alias("delivery_oda"),
        ])

    df = df.with_columns(
        (pl.col("pickup_oda") | pl.col("delivery_oda")).alias("is_oda")
    )

    oda_count = df["is_oda"].sum()
    if oda_count:
        logger.warning("%d shipment(s) out of delivery area", oda_count)

    return df


def _drop_serviceability_columns(df: pl.DataFrame) -> pl.DataFrame:
    return df.drop([c for c in df.columns if c.startswith("_pickup_svc_") or c.startswith("_drop_svc_")])


# =============================================================================
# CALCULATE CHARGES
# =============================================================================

def calculate_charges(
    df: pl.DataFrame,
    settings: Settings | None = None,
    rates: pl.DataFrame | None = None,
) -> pl.DataFrame:
    """
    Calculate freight and surcharges for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments
        settings: Tariff settings (DEFAULT_SETTINGS if not provided)
        rates: Long-format rate matrix (loaded if not provided)

    Returns:
        DataFrame with surcharge flags, costs, line items, and totals

    Processing order:
        1. Rate lookup  - per-kg rate by zone pair
        2. Freight      - rate * chargeable weight, floored at the minimum
        3. Surcharges   - apply surcharge flags and costs
        4. Fuel         - percentage of freight
        5. Line items   - group and round
        6. Total        - unrounded sum, rounded once
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    if rates is None:
        rates = default_rates()

    df = _lookup_base_rate(df, rates)
    df = _apply_freight(df, settings)
    df = _apply_surcharges(df, ALL, settings)
    df = _apply_fuel(df, settings)
    df = _calculate_line_items(df)
    df = _calculate_total(df)
    df = _mask_unresolved(df)
    df = _stamp_version(df)

    return df


def _lookup_base_rate(df: pl.DataFrame, rates: pl.DataFrame) -> pl.DataFrame:
    """
    Look up the per-kg rate for (zone_from, zone_to).

    A missing cell prices at 0 (freight then falls back to the minimum) and
    is flagged with rate_found = False.
    """
    rates = rates.select([
        pl.col("zone_from").cast(pl.Utf8),
        pl.col("zone_to").cast(pl.Utf8),
        pl.col("rate").cast(pl.Float64).alias("base_rate"),
    ]).unique(subset=["zone_from", "zone_to"], keep="last")

    df = df.with_row_index("_row_id")
    df = df.join(rates, on=["zone_from", "zone_to"], how="left")
    df = df.sort("_row_id").drop("_row_id")

    df = df.with_columns([
        pl.col("base_rate").is_not_null().alias("rate_found"),
        pl.col("base_rate").fill_null(0.0),
    ])

    missing = df.filter(pl.col("zone_resolved") & ~pl.col("rate_found"))
    if len(missing) > 0:
        pairs = missing.select(["zone_from", "zone_to"]).unique().iter_rows()
        logger.warning(
            "%d shipment(s) have no rate for zone pair(s): %s",
            len(missing),
            ", ".join(f"{a} -> {b}" for a, b in sorted(pairs)),
        )

    return df


def _apply_freight(df: pl.DataFrame, settings: Settings) -> pl.DataFrame:
    """Basic freight = rate * chargeable weight, never below the minimum."""
    return df.with_columns(
        pl.max_horizontal(
            pl.col("base_rate") * pl.col("chargeable_weight_kg"),
            pl.lit(float(settings.min_freight_amount)),
        ).alias("cost_freight")
    )


def _apply_surcharges(df: pl.DataFrame, surcharges: list, settings: Settings) -> pl.DataFrame:
    """
    Apply surcharges, handling mutual exclusivity within exclusivity groups.

    Surcharges with the same exclusivity_group compete - only highest priority wins.
    Surcharges without exclusivity_group are applied independently.
    """
    # Separate standalone vs exclusive surcharges
    standalone = [s for s in surcharges if s.exclusivity_group is None]
    exclusive = [s for s in surcharges if s.exclusivity_group is not None]

    # Apply standalone surcharges (no competition)
    for s in standalone:
        df = _apply_single_surcharge(df, s, settings)

    # Apply exclusive surcharges by group
    for group_name in sorted(get_unique_exclusivity_groups(exclusive)):
        df = _apply_exclusive_group(df, group_name, settings)

    return df


def _apply_single_surcharge(df: pl.DataFrame, surcharge, settings: Settings) -> pl.DataFrame:
    """Apply a single surcharge without competition."""
    flag_col = surcharge.flag_col()
    cost_col = surcharge.cost_col()

    df = df.with_columns(
        surcharge.conditions(settings).fill_null(False).alias(flag_col)
    )
    return df.with_columns(
        pl.when(pl.col(flag_col))
        .then(surcharge.cost(settings))
        .otherwise(pl.lit(0.0))
        .alias(cost_col)
    )


def _apply_exclusive_group(df: pl.DataFrame, group_name: str, settings: Settings) -> pl.DataFrame:
    """
    Apply mutually exclusive surcharges within a group.

    Only the highest priority surcharge (lowest number) that matches wins.
    """
    group = get_exclusivity_group(group_name)
    exclusion_mask = pl.lit(False)

    for surcharge in group:
        flag_col = surcharge.flag_col()
        cost_col = surcharge.cost_col()

        # Applies only if: conditions met AND no higher priority already matched
        applies = surcharge.conditions(settings).fill_null(False) & ~exclusion_mask

        df = df.with_columns(applies.alias(flag_col))
        df = df.with_columns(
            pl.when(pl.col(flag_col))
            .then(surcharge.cost(settings))
            .otherwise(pl.lit(0.0))
            .alias(cost_col)
        )

        # Update exclusion mask: if this one matched, exclude the rest
        exclusion_mask = exclusion_mask | pl.col(flag_col)

    return df


def _apply_fuel(df: pl.DataFrame, settings: Settings) -> pl.DataFrame:
    """Apply fuel surcharge as a percentage of basic freight.

    Rate configured in data/reference/fuel.py, overridable via settings.
    """
    return df.with_columns(
        (pl.col("cost_freight") * pl.lit(float(settings.fuel_surcharge_percent) / 100))
        .alias("cost_fuel")
    )


def _line_item_cols(line_item: str) -> list[str]:
    """Unrounded cost columns feeding a result line item."""
    if line_item in ("freight", "fuel"):
        return [f"cost_{line_item}"]
    return [s.cost_col() for s in get_line_item(line_item)]


def _calculate_line_items(df: pl.DataFrame) -> pl.DataFrame:
    """Group costs into result line items, each rounded to 2 decimals."""
    return df.with_columns([
        pl.sum_horizontal(_line_item_cols(item)).round(2, mode=ROUND_MODE).alias(f"charge_{item}")
        for item in RESULT_LINE_ITEMS
    ])


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate cost_subtotal (unrounded) and cost_total (whole units).

    The total is summed from unrounded costs and rounded once, half up, so
    it can differ by a unit from the sum of the rounded line items.
    """
    cost_cols = [c for item in RESULT_LINE_ITEMS for c in _line_item_cols(item)]

    df = df.with_columns(pl.sum_horizontal(cost_cols).alias("cost_subtotal"))
    return df.with_columns(
        (pl.col("cost_subtotal") + 0.5).floor().cast(pl.Int64).alias("cost_total")
    )


def _mask_unresolved(df: pl.DataFrame) -> pl.DataFrame:
    """Null out costs for shipments whose zones could not be resolved."""
    cost_cols = [c for c in df.columns if c.startswith("cost_") or c.startswith("charge_")]
    return df.with_columns([
        pl.when(pl.col("zone_resolved")).then(pl.col(c)).otherwise(None).alias(c)
        for c in cost_cols
    ])


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


# =============================================================================
# RESULT
# =============================================================================

def _warnings(row: dict) -> tuple[str, ...]:
    """Human-readable warnings for a calculated row."""
    warnings = []
    if not row["rate_found"]:
        warnings.append(
            f"No rate for zone {row['zone_from']} -> {row['zone_to']}; "
            f"minimum freight applied"
        )
    if row["pickup_oda"]:
        warnings.append(f"Pickup pincode {row['pickup_pincode'] or '(blank)'} is out of delivery area")
    if row["delivery_oda"]:
        warnings.append(f"Drop pincode {row['drop_pincode'] or '(blank)'} is out of delivery area")
    return tuple(warnings)


def _to_result(row: dict) -> CalculationResult:
    """Build a CalculationResult from a calculated DataFrame row."""
    return CalculationResult(
        volumetric_weight=row["volumetric_weight_kg"],
        dead_weight=row["weight_kg"],
        chargeable_weight=row["chargeable_weight_kg"],
        zone_from=row["zone_from"],
        zone_to=row["zone_to"],
        base_rate=row["base_rate"],
        freight_charge=row["charge_freight"],
        fuel_surcharge=row["charge_fuel"],
        awb_charge=row["charge_awb"],
        oda_charge=row["charge_oda"],
        handling_charge=row["charge_handling"],
        regional_charge=row["charge_regional"],
        other_surcharges=row["charge_other"],
        cod_charge=row["charge_cod"],
        rov_charge=row["charge_rov"],
        total_cost=row["cost_total"],
        is_oda=row["is_oda"],
        pickup_oda=row["pickup_oda"],
        delivery_oda=row["delivery_oda"],
        warnings=_warnings(row),
    )


__all__ = [
    "calculate_costs",
    "calculate",
    "shipment_frame",
    "supplement_shipments",
    "calculate_charges",
    "REQUIRED_INPUT_COLS",
    "OPTION_FLAG_COLS",
    "RESULT_LINE_ITEMS",
]
