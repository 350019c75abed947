#!/usr/bin/env python3
"""
Check the Maidenhead codec against reference locators and a global sweep.

Every reference location must encode to its expected locator, and every
point of a regular lat/lon grid must round-trip: decoding its locator
lands within half a cell of the point, and re-encoding the decoded
centre gives back the same locator.
"""

import argparse
import sys

import numpy as np
from loguru import logger

from maidenhead import (
    MAX_PRECISION,
    MIN_PRECISION,
    ReferenceSet,
    cell_bounds,
    coordinates_to_grid_code,
    grid_code_to_coordinates,
)

# Allowance for the encoder's epsilon nudge, in degrees
TOLERANCE = 1e-6


def check_references(references: ReferenceSet) -> list:
    """Encode every reference location and collect mismatches."""
    failures = []
    for reference in references.references:
        lat, lon, expected = reference.as_tuple()
        locator = coordinates_to_grid_code(lat, lon, reference.precision)
        if locator != expected:
            failures.append((reference.name, expected, locator))
    return failures


def sweep_grid(step: float, precisions: list) -> tuple:
    """Round-trip every point of a global grid at each precision."""
    failures = []
    checked = 0

    lats = np.arange(-90.0, 90.0 + step / 2, step)
    lons = np.arange(-180.0, 180.0 + step / 2, step)

    for precision in precisions:
        for lat in lats:
            for lon in lons:
                lat, lon = float(min(lat, 90.0)), float(min(lon, 180.0))
                checked += 1

                locator = coordinates_to_grid_code(lat, lon, precision)
                centre_lat, centre_lon = grid_code_to_coordinates(locator)
                cell = cell_bounds(locator)

                if (abs(centre_lat - lat) > cell.height / 2 + TOLERANCE
                        or abs(centre_lon - lon) > cell.width / 2 + TOLERANCE):
                    failures.append((lat, lon, locator, "outside cell"))
                    continue

                again = coordinates_to_grid_code(centre_lat, centre_lon, precision)
                if again != locator:
                    failures.append((lat, lon, locator, f"re-encoded as {again}"))

    return checked, failures


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Check the Maidenhead locator codec')
    parser.add_argument('--config', type=str, default='config/reference_locators.yaml',
                        help='Path to reference locator YAML file')
    parser.add_argument('--step', type=float, default=1.7,
                        help='Grid step in degrees for the round-trip sweep')
    parser.add_argument('--precision', type=int, action='append',
                        choices=range(MIN_PRECISION, MAX_PRECISION + 1),
                        help='Precision to sweep (repeatable, default: all)')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every encode and decode')
    return parser.parse_args()


def main():
    """Main entry point for the codec check."""
    args = parse_arguments()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")
    logger.enable("maidenhead")

    ok = True

    print(f"Loading reference locators from {args.config}...")
    try:
        references = ReferenceSet.from_yaml(args.config)
    except FileNotFoundError:
        print(f"✗ Reference file not found: {args.config}")
        return 1

    failures = check_references(references)
    print(f"Reference locators checked: {len(references.references)}")
    if failures:
        ok = False
        print("\n❌ REFERENCE MISMATCHES:")
        for name, expected, actual in failures:
            print(f"  {name}: expected {expected}, got {actual}")
    else:
        print("✓ All reference locators match")

    precisions = args.precision or list(range(MIN_PRECISION, MAX_PRECISION + 1))
    print(f"\nSweeping grid with step {args.step} at precisions {precisions}...")
    checked, failures = sweep_grid(args.step, precisions)
    print(f"Points checked: {checked}")
    print(f"Round-trip failures: {len(failures)}")

    if failures:
        ok = False
        print("\n❌ ROUND-TRIP FAILURES:")
        for i, (lat, lon, locator, reason) in enumerate(failures[:10]):  # Show first 10
            print(f"  {i+1}. ({lat:.6f}, {lon:.6f}) -> {locator}: {reason}")
        if len(failures) > 10:
            print(f"  ... and {len(failures) - 10} more")
    else:
        print("✓ Every point round-trips")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
