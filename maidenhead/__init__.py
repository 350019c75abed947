"""
Maidenhead Locator System

This package converts between latitude/longitude coordinates and
Maidenhead grid locators of 2 to 10 characters, and computes
great-circle distances and bearings between grid positions.
"""

from loguru import logger

from .codec import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    MIN_PRECISION,
    cell_bounds,
    coordinates_to_grid_code,
    grid_code_to_coordinates,
    to_lat_lon,
    valid,
)
from .exceptions import (
    InvalidCharacter,
    InvalidLocator,
    InvalidPrecision,
    InvalidUnit,
    MaidenheadError,
    OutOfRange,
)
from .position import Position, from_coordinates, from_locator
from .schemas import GridCell, ReferenceLocator, ReferenceSet
from .utils import compass_bearing

__version__ = "0.2.0"

__all__ = [
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    "MIN_PRECISION",
    "GridCell",
    "InvalidCharacter",
    "InvalidLocator",
    "InvalidPrecision",
    "InvalidUnit",
    "MaidenheadError",
    "OutOfRange",
    "Position",
    "ReferenceLocator",
    "ReferenceSet",
    "cell_bounds",
    "compass_bearing",
    "coordinates_to_grid_code",
    "from_coordinates",
    "from_locator",
    "grid_code_to_coordinates",
    "to_lat_lon",
    "valid",
]

# Library code stays quiet unless the application opts in
logger.disable("maidenhead")
