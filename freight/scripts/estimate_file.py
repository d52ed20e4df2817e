"""
Estimate Freight Costs for a File
=================================

Runs a CSV of shipments through the calculator and writes the costed rows.

Input columns are the REQUIRED INPUT COLUMNS of freight.calculate_costs
(plus optional dim_unit and is_* service flags).

Usage:
    python -m freight.scripts.estimate_file shipments.csv
    python -m freight.scripts.estimate_file shipments.csv --output costed.csv
    python -m freight.scripts.estimate_file shipments.csv --serviceability serviceability.csv --settings settings.json
"""

import argparse
import logging
from pathlib import Path

import polars as pl

from freight.calculate_costs import calculate_costs, OPTION_FLAG_COLS, TEXT_INPUT_COLS
from freight.data import load_serviceability
from freight.settings import load_settings


logger = logging.getLogger(__name__)

SUMMARY_COLS = [
    "drop_state",
    "zone_from",
    "zone_to",
    "chargeable_weight_kg",
    "charge_freight",
    "charge_fuel",
    "cost_total",
]


def load_shipments(path: Path) -> pl.DataFrame:
    """Read shipments, keeping pincodes as text (leading zeros)."""
    return pl.read_csv(
        path,
        schema_overrides={c: pl.Utf8 for c in TEXT_INPUT_COLS},
    )


def main():
    parser = argparse.ArgumentParser(
        description="Estimate freight costs for a CSV of shipments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m freight.scripts.estimate_file shipments.csv
  python -m freight.scripts.estimate_file shipments.csv --output costed.csv
  python -m freight.scripts.estimate_file shipments.csv --serviceability serviceability.csv
        """
    )

    parser.add_argument("input", type=str, help="Shipments CSV")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV (default: <input>_costed.csv)"
    )
    parser.add_argument(
        "--serviceability",
        type=str,
        default=None,
        help="Serviceability CSV (enables ODA checks and zone overrides)"
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="JSON file of settings overrides (default: $FREIGHT_SETTINGS)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log pipeline details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_name(f"{input_path.stem}_costed.csv")

    print("=" * 60)
    print("FREIGHT COST ESTIMATE")
    print("=" * 60)

    settings = load_settings(args.settings)
    serviceability = load_serviceability(args.serviceability) if args.serviceability else None

    print(f"\nLoading shipments from {input_path}...")
    df = load_shipments(input_path)
    print(f"  Loaded {len(df):,} shipments")

    flags = [c for c in OPTION_FLAG_COLS if c in df.columns]
    if flags:
        print(f"  Service flags: {', '.join(flags)}")

    print("Calculating costs...")
    df = calculate_costs(df, settings=settings, serviceability=serviceability)

    unresolved = df.filter(~pl.col("zone_resolved")).height
    if unresolved:
        logger.warning("%d shipment(s) could not be zoned and have no cost", unresolved)

    df.write_csv(output_path)
    print(f"  Saved to {output_path}")

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(df.select(SUMMARY_COLS).head(10))
    print(f"\nShipments costed: {len(df) - unresolved:,} / {len(df):,}")
    print(f"Total cost:       {df['cost_total'].sum():,}")
    print(f"ODA shipments:    {df['is_oda'].sum():,}")


if __name__ == "__main__":
    main()
