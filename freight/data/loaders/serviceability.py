"""
Serviceability Table Loader

Parses the carrier's pincode serviceability export into a DataFrame keyed by
pincode. The export is a delimited text table with a header row, e.g.

    PIN CODE,PICK UP STATION,DELIVERY STATE/UT,DELIVERY CITY,PICK UP AVAILABLE,DELIVERY AVAILABLE,Zonal Code

COLUMN MATCHING
---------------
Headers are matched case-insensitively by substring, first match wins:

    pincode             - contains "PIN" and "CODE" (required)
    pickup_available    - contains "PICK" and "AVAILABLE"
    delivery_available  - contains "DELIVERY" and "AVAILABLE"
    zone                - contains "ZONAL"
    city                - contains "CITY"
    state               - contains "STATE"

Availability columns that are absent default to available. When present,
only "Y", "YES" and "TRUE" count as available. Rows whose pincode is not all
digits are skipped. A later row for the same pincode replaces an earlier one.
"""

import io
import logging
from pathlib import Path
from typing import Mapping

import polars as pl
from polars.exceptions import NoDataError

from ...models import ServiceabilityRecord


logger = logging.getLogger(__name__)

SERVICEABILITY_COLUMNS = [
    "pincode",
    "pickup_available",
    "delivery_available",
    "zone",
    "city",
    "state",
]

SERVICEABILITY_SCHEMA = {
    "pincode": pl.Utf8,
    "pickup_available": pl.Boolean,
    "delivery_available": pl.Boolean,
    "zone": pl.Utf8,
    "city": pl.Utf8,
    "state": pl.Utf8,
}

# Output column -> header keywords that must all appear in the header
HEADER_RULES = {
    "pincode": ("PIN", "CODE"),
    "pickup_available": ("PICK", "AVAILABLE"),
    "delivery_available": ("DELIVERY", "AVAILABLE"),
    "zone": ("ZONAL",),
    "city": ("CITY",),
    "state": ("STATE",),
}

AVAILABLE_VALUES = ["Y", "YES", "TRUE"]


class ServiceabilityTableError(ValueError):
    """Serviceability table is structurally unusable."""


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def load_serviceability(source: str | Path | bytes) -> pl.DataFrame:
    """
    Load a serviceability table.

    Args:
        source: Path to the CSV file, or the raw file contents as bytes

    Returns:
        DataFrame with SERVICEABILITY_COLUMNS, one row per pincode

    Raises:
        ServiceabilityTableError: If the file is empty or has no pincode column
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    try:
        raw = pl.read_csv(
            source,
            infer_schema_length=0,  # Everything as strings
            truncate_ragged_lines=True,
        )
    except NoDataError as e:
        raise ServiceabilityTableError("Serviceability table is empty") from e

    columns = _match_columns(raw.columns)
    if "pincode" not in columns:
        raise ServiceabilityTableError("Missing 'PIN CODE' header in serviceability table")

    df = _normalize_rows(raw, columns)
    logger.info("Loaded serviceability for %d pincode(s)", len(df))
    return df


def _match_columns(headers: list[str]) -> dict[str, str]:
    """Map output column -> source header using HEADER_RULES."""
    matched = {}
    for target, keywords in HEADER_RULES.items():
        for header in headers:
            normalized = header.strip().upper().replace('"', "").replace("'", "")
            if all(k in normalized for k in keywords):
                matched[target] = header
                break
    return matched


def _clean(header: str) -> pl.Expr:
    """Trim a raw cell and drop stray quote characters."""
    return (
        pl.col(header)
        .fill_null("")
        .str.replace_all(r"['\"]", "")
        .str.strip_chars()
    )


def _normalize_rows(raw: pl.DataFrame, columns: dict[str, str]) -> pl.DataFrame:
    """Select, clean, and validate matched columns."""
    exprs = [_clean(columns["pincode"]).alias("pincode")]

    for flag in ["pickup_available", "delivery_available"]:
        if flag in columns:
            exprs.append(
                _clean(columns[flag]).str.to_uppercase().is_in(AVAILABLE_VALUES).alias(flag)
            )
        else:
            exprs.append(pl.lit(True).alias(flag))

    for text in ["zone", "city", "state"]:
        if text in columns:
            exprs.append(_clean(columns[text]).alias(text))
        else:
            exprs.append(pl.lit("").alias(text))

    df = raw.select(exprs)

    valid = pl.col("pincode").str.contains(r"^\d+$")
    rejected = df.filter(~valid & (pl.col("pincode") != "")).height
    if rejected:
        logger.warning("Skipped %d serviceability row(s) with invalid pincode", rejected)

    return (
        df
        .filter(valid)
        .unique(subset="pincode", keep="last", maintain_order=True)
        .select(SERVICEABILITY_COLUMNS)
    )


# =============================================================================
# LOOKUPS
# =============================================================================

def serviceability_records(df: pl.DataFrame) -> dict[str, ServiceabilityRecord]:
    """Convert a serviceability table to a pincode -> record mapping."""
    return {
        row["pincode"]: ServiceabilityRecord(
            pickup_available=row["pickup_available"],
            delivery_available=row["delivery_available"],
            zone=row["zone"],
            city=row["city"],
            state=row["state"],
        )
        for row in df.iter_rows(named=True)
    }


def serviceability_frame(records: Mapping[str, ServiceabilityRecord]) -> pl.DataFrame:
    """Convert a pincode -> record mapping to a serviceability table."""
    return pl.DataFrame(
        [
            {
                "pincode": pincode,
                "pickup_available": record.pickup_available,
                "delivery_available": record.delivery_available,
                "zone": record.zone,
                "city": record.city,
                "state": record.state,
            }
            for pincode, record in records.items()
        ],
        schema=SERVICEABILITY_SCHEMA,
    )


def lookup_serviceability(
    df: pl.DataFrame | None,
    pincode: str
) -> ServiceabilityRecord | None:
    """
    Find the record for an exact pincode.

    Returns None when no table is loaded or the pincode is not in it.
    """
    if df is None or not pincode:
        return None

    match = df.filter(pl.col("pincode") == pincode.strip())
    if match.is_empty():
        return None

    row = match.row(0, named=True)
    return ServiceabilityRecord(
        pickup_available=row["pickup_available"],
        delivery_available=row["delivery_available"],
        zone=row["zone"],
        city=row["city"],
        state=row["state"],
    )


__all__ = [
    "load_serviceability",
    "serviceability_records",
    "serviceability_frame",
    "lookup_serviceability",
    "ServiceabilityTableError",
    "SERVICEABILITY_COLUMNS",
]
