"""
Maidenhead locator codec.

This module converts between latitude/longitude and Maidenhead grid
locators of 1 to 5 pairs (2 to 10 characters). All functions are pure
and stateless.
"""

from typing import Tuple
import math
import re

from loguru import logger

from .exceptions import InvalidLocator, InvalidPrecision
from .schemas import GridCell
from .utils import letter_to_number, number_to_letter, range_check

MIN_PRECISION = 1
MAX_PRECISION = 5
DEFAULT_PRECISION = 3

LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0

# Field cells are 20 deg of longitude by 10 deg of latitude
FIELD_WIDTH = 20.0
FIELD_HEIGHT = 10.0
FIELD_COUNT = 18

# Keeps floor() off exact cell boundaries
EPSILON = 0.0000001

# Subdivisions per pair: field, square (x10), subsquare (x24),
# extended square (x10), extended subsquare (x24)
DIVISORS = (1, 10, 10 * 24, 10 * 24 * 10, 10 * 24 * 10 * 24)

# Each level is only allowed once the previous one is present
_LOCATOR_PATTERN = re.compile(
    r"[A-R]{2}(?:[0-9]{2}(?:[A-X]{2}(?:[0-9]{2}(?:[A-X]{2})?)?)?)?",
    re.IGNORECASE | re.ASCII,
)


def valid(locator) -> bool:
    """
    Check whether a string is a Maidenhead locator.

    A locator is a field pair (A-R), then optionally a square pair (0-9),
    a subsquare pair (A-X), an extended square pair (0-9) and an extended
    subsquare pair (A-X), each level requiring the one before. Letters
    are case-insensitive.

    Args:
        locator: Candidate locator

    Returns:
        True if the locator is well formed
    """
    if not isinstance(locator, str):
        return False
    return _LOCATOR_PATTERN.fullmatch(locator) is not None


def check_precision(precision) -> int:
    """
    Validate a locator precision.

    Args:
        precision: Number of locator pairs

    Returns:
        The precision, unchanged

    Raises:
        InvalidPrecision: If precision is not an integer in [1, 5]
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecision(precision, MIN_PRECISION, MAX_PRECISION)
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise InvalidPrecision(precision, MIN_PRECISION, MAX_PRECISION)
    return precision


def _accumulate(locator: str, centre: bool) -> Tuple[float, float]:
    """Sum the contribution of every pair, optionally centring on the last."""
    lat = -LATITUDE_LIMIT
    lon = -LONGITUDE_LIMIT
    pairs = len(locator) // 2

    for counter in range(pairs):
        lon_value = letter_to_number(locator[counter * 2])
        lat_value = letter_to_number(locator[counter * 2 + 1])
        midpoint = 0.5 if centre and counter == pairs - 1 else 0.0
        divisor = DIVISORS[counter]

        lat += (lat_value + midpoint) * FIELD_HEIGHT / divisor
        lon += (lon_value + midpoint) * FIELD_WIDTH / divisor

    return lat, lon


def grid_code_to_coordinates(locator: str) -> Tuple[float, float]:
    """
    Convert a locator to the coordinates of its cell centre.

    Args:
        locator: Maidenhead locator of 2 to 10 characters

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Raises:
        InvalidLocator: If the locator is not valid
    """
    if not valid(locator):
        raise InvalidLocator(locator)

    lat, lon = _accumulate(locator, centre=True)
    logger.debug(f"Decoded {locator} to ({lat}, {lon})")
    return lat, lon


def to_lat_lon(locator: str) -> Tuple[float, float]:
    """Return the (latitude, longitude) centre of a locator's cell."""
    return grid_code_to_coordinates(locator)


def coordinates_to_grid_code(
    lat: float,
    lon: float,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """
    Convert coordinates to a locator.

    Field letters are upper case, subsquare letters lower case, e.g.
    ``FN31pr``.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        precision: Number of locator pairs, 1 to 5

    Returns:
        Locator string of ``2 * precision`` characters

    Raises:
        OutOfRange: If a coordinate is outside its limits
        InvalidPrecision: If precision is outside [1, 5]
    """
    lat = range_check("latitude", LATITUDE_LIMIT, lat)
    lon = range_check("longitude", LONGITUDE_LIMIT, lon)
    precision = check_precision(precision)

    # The north pole and the antimeridian belong to the last field
    upper = FIELD_COUNT - EPSILON
    lat_part = min((lat + LATITUDE_LIMIT) / FIELD_HEIGHT + EPSILON, upper)
    lon_part = min((lon + LONGITUDE_LIMIT) / FIELD_WIDTH + EPSILON, upper)

    pairs = [
        number_to_letter(math.floor(lon_part)).upper()
        + number_to_letter(math.floor(lat_part)).upper()
    ]

    for counter in range(precision - 1):
        divisor = 10 if counter % 2 == 0 else 24
        lat_part = (lat_part - math.floor(lat_part)) * divisor
        lon_part = (lon_part - math.floor(lon_part)) * divisor

        if counter % 2 == 0:
            pairs.append(f"{math.floor(lon_part)}{math.floor(lat_part)}")
        else:
            pairs.append(
                number_to_letter(math.floor(lon_part))
                + number_to_letter(math.floor(lat_part))
            )

    locator = "".join(pairs)
    logger.debug(f"Encoded ({lat}, {lon}) at precision {precision} to {locator}")
    return locator


def cell_bounds(locator: str) -> GridCell:
    """
    Compute the rectangle covered by a locator.

    Args:
        locator: Maidenhead locator of 2 to 10 characters

    Returns:
        GridCell with the cell edges and centre

    Raises:
        InvalidLocator: If the locator is not valid
    """
    if not valid(locator):
        raise InvalidLocator(locator)

    south, west = _accumulate(locator, centre=False)
    divisor = DIVISORS[len(locator) // 2 - 1]
    height = FIELD_HEIGHT / divisor
    width = FIELD_WIDTH / divisor

    return GridCell(
        locator=locator,
        south=south,
        north=south + height,
        west=west,
        east=west + width,
        latitude=south + height / 2,
        longitude=west + width / 2,
    )
