"""
Geo-math helpers for the Maidenhead codec.

This module provides the small stateless functions the locator codec
and the Position type are built from: angle conversion, compass
bucketing, locator character mapping and coordinate range checks.
"""

import math
import string
from typing import NamedTuple

from loguru import logger

from .exceptions import InvalidCharacter, OutOfRange


class CompassBand(NamedTuple):
    """A named compass direction covering the open interval (start, end)."""

    label: str
    start: float
    end: float


# Bands are not contiguous: a heading sitting on a boundary such as 33/34
# or 56/57 falls in no band.
COMPASS_BEARINGS = (
    CompassBand("N", 0, 11),
    CompassBand("NNE", 11, 33),
    CompassBand("NE", 34, 56),
    CompassBand("ENE", 57, 78),
    CompassBand("E", 79, 101),
    CompassBand("ESE", 102, 123),
    CompassBand("SE", 124, 146),
    CompassBand("SSE", 147, 168),
    CompassBand("S", 169, 191),
    CompassBand("SSW", 192, 213),
    CompassBand("SW", 214, 236),
    CompassBand("WSW", 237, 258),
    CompassBand("W", 259, 281),
    CompassBand("WNW", 282, 303),
    CompassBand("NW", 304, 326),
    CompassBand("NNW", 327, 348),
    CompassBand("N", 349, 360),
)


def degrees_to_radians(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return deg / 180 * math.pi


def radians_to_degrees(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return rad / math.pi * 180


def compass_bearing(heading: float) -> str:
    """
    Name the compass point for a heading.

    Parameters
    ----------
    heading : float
        Heading in degrees, expected in [0, 360]

    Returns
    -------
    str
        One of the 16 compass-point labels (N, NNE, ... NNW), or an empty
        string when the heading is outside [0, 360] or lands on a gap
        between bands
    """
    if not 0 <= heading <= 360:
        return ""

    for band in COMPASS_BEARINGS:
        if band.start < heading < band.end:
            return band.label

    return ""


def letter_to_number(letter: str) -> int:
    """
    Map a locator character to its numeric value.

    Digits map to their value, letters (either case) to their zero-based
    position in the alphabet, so ``"a"`` and ``"A"`` are both 0.

    Parameters
    ----------
    letter : str
        A single locator character

    Returns
    -------
    int
        Numeric value of the character

    Raises
    ------
    InvalidCharacter
        If the character is neither an ASCII digit nor an ASCII letter
    """
    if not isinstance(letter, str) or len(letter) != 1:
        raise InvalidCharacter(letter)

    if letter in string.digits:
        return int(letter)
    if letter in string.ascii_letters:
        return ord(letter.lower()) - ord("a")

    raise InvalidCharacter(letter)


def number_to_letter(number: int) -> str:
    """Return the lower-case letter at zero-based alphabet position ``number``."""
    return chr(ord("a") + number)


def range_check(name: str, limit: float, value) -> float:
    """
    Validate that a coordinate lies within [-limit, +limit].

    Parameters
    ----------
    name : str
        Name of the coordinate, used in the error message
    limit : float
        Absolute limit of the axis (90 for latitude, 180 for longitude)
    value : float
        Value to check

    Returns
    -------
    float
        The value, unchanged

    Raises
    ------
    OutOfRange
        If the value is outside the limits or is not a number
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Rejected non-numeric {name}: {value!r}")
        raise OutOfRange(name, limit, value) from None

    # NaN fails the comparison and is rejected along with real overflows
    if not -limit <= value <= limit:
        logger.debug(f"Rejected {name} {value} outside +/-{limit}")
        raise OutOfRange(name, limit, value)

    return value
