"""
Freight Cost Calculator
=======================

Interactive CLI tool to calculate the itemized freight cost for a single shipment.

Usage:
    python -m freight.scripts.calculator
    python -m freight.scripts.calculator --serviceability serviceability.csv --settings settings.json
"""

import argparse
import logging

from freight.calculate_costs import calculate
from freight.data import load_serviceability
from freight.data.loaders import ServiceabilityPincodeLookup
from freight.models import Dimensions, Location, Shipment, ShipmentOptions
from freight.settings import load_settings
from freight.version import VERSION


def ask_yes_no(prompt: str) -> bool:
    return input(f"{prompt} [y/N]: ").strip().lower() in ("y", "yes")


def get_location(label: str, lookup: ServiceabilityPincodeLookup) -> Location:
    """Prompt for a location, pre-filling city/state from serviceability data."""
    pincode = input(f"{label} pincode: ").strip()

    found = lookup.lookup(pincode)
    if found is not None:
        city, state = found
        print(f"  -> {city}, {state}")
        return Location(pincode=pincode, city=city, state=state)

    city = input(f"{label} city: ").strip()
    state = input(f"{label} state: ").strip()
    return Location(pincode=pincode, city=city, state=state)


def get_user_input(lookup: ServiceabilityPincodeLookup) -> tuple:
    """Prompt user for shipment details."""
    print("\n=== Freight Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    pickup = get_location("Pickup", lookup)
    drop = get_location("Drop", lookup)

    # Values stay as typed; the calculator treats junk as 0
    weight = input("\nDead weight (kg): ")
    invoice_value = input("Invoice value: ")

    unit = input("Dimension unit (cm/inch) [default: cm]: ").strip().lower() or "cm"
    length = input(f"Length ({unit}): ")
    breadth = input(f"Breadth ({unit}): ")
    height = input(f"Height ({unit}): ")

    print("\nServices:")
    options = ShipmentOptions(
        cod=ask_yes_no("  Cash on delivery"),
        rov=ask_yes_no("  Carrier risk (ROV)"),
        csd=ask_yes_no("  CSD delivery"),
        mall_delivery=ask_yes_no("  Mall delivery"),
        time_specific=ask_yes_no("  Time specific delivery"),
        holiday=ask_yes_no("  Sunday / holiday delivery"),
        reattempt=ask_yes_no("  Re-attempt"),
    )

    shipment = Shipment(
        weight=weight,
        invoice_value=invoice_value,
        dimensions=Dimensions(length=length, breadth=breadth, height=height, unit=unit),
    )
    return pickup, drop, shipment, options


def print_results(result, pickup: Location, drop: Location) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    print(f"\nRoute: {pickup.city or pickup.state} ({result.zone_from}) -> "
          f"{drop.city or drop.state} ({result.zone_to})")
    print(f"Rate: {result.base_rate:.2f} / kg")

    print(f"\nDead weight:       {result.dead_weight:>8.2f} kg")
    print(f"Volumetric weight: {result.volumetric_weight:>8.2f} kg")
    print(f"Chargeable weight: {result.chargeable_weight:>8.2f} kg")

    if result.is_oda:
        legs = []
        if result.pickup_oda:
            legs.append("pickup")
        if result.delivery_oda:
            legs.append("delivery")
        print(f"\n!! Out of delivery area ({', '.join(legs)}) - ODA charges applied")

    print("\n--- Cost Breakdown ---")
    lines = [
        ("Basic freight", result.freight_charge),
        ("Fuel surcharge", result.fuel_surcharge),
        ("AWB charge", result.awb_charge),
        ("ODA surcharge", result.oda_charge),
        ("Handling", result.handling_charge),
        ("Regional surcharge", result.regional_charge),
        ("Special services", result.other_surcharges),
        ("COD", result.cod_charge),
        ("ROV", result.rov_charge),
    ]
    for label, amount in lines:
        if amount > 0 or label == "Basic freight":
            print(f"{label + ':':<20}{amount:>10.2f}")

    print(f"{'':<20}{'=' * 10}")
    print(f"{'TOTAL:':<20}{result.total_cost:>10d}")

    for warning in result.warnings:
        print(f"\nWarning: {warning}")
    print()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Calculate freight cost for one shipment")
    parser.add_argument(
        "--serviceability",
        type=str,
        default=None,
        help="Serviceability CSV (enables ODA checks and pincode auto-fill)"
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="JSON file of settings overrides (default: $FREIGHT_SETTINGS)"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.settings)
        serviceability = load_serviceability(args.serviceability) if args.serviceability else None
        lookup = ServiceabilityPincodeLookup(serviceability)

        # Get user input
        pickup, drop, shipment, options = get_user_input(lookup)

        # Run through pipeline
        result = calculate(pickup, drop, shipment, settings, options, serviceability=serviceability)

        if result is None:
            print("\nCannot quote: pickup or drop state is missing or not in a tariff zone.")
            return

        # Print results
        print_results(result, pickup, drop)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
