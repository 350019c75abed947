"""
Maidenhead positions.

A Position holds a latitude, a longitude and a locator precision, and
derives its locator string lazily from them. Distances and bearings
between positions use the spherical law of cosines.
"""

import math
from typing import Optional

from loguru import logger

from .codec import (
    DEFAULT_PRECISION,
    LATITUDE_LIMIT,
    LONGITUDE_LIMIT,
    check_precision,
    coordinates_to_grid_code,
    grid_code_to_coordinates,
    valid,
)
from .exceptions import InvalidLocator, InvalidUnit
from .utils import compass_bearing, degrees_to_radians, radians_to_degrees, range_check

EARTH_RADIUS_KM = 6371.0

# Multipliers from kilometres to each supported unit
DISTANCE_UNITS = {
    "km": 1.0,
    "m": 1000.0,
}


def _significant(value: float, digits: int = 6) -> float:
    """Round a value to a number of significant figures."""
    return float(f"{value:.{digits}g}")


def _central_angle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Angle subtended at the earth's centre by two points, in radians.

    All arguments are in radians.
    """
    co = (
        math.cos(lon1 - lon2) * math.cos(lat1) * math.cos(lat2)
        + math.sin(lat1) * math.sin(lat2)
    )
    co = max(-1.0, min(1.0, co))

    # Exactly a quarter circle apart; the tangent below is undefined
    if co == 0:
        return math.pi / 2

    ca = math.atan(abs(math.sqrt(1 - co * co) / co))
    if co < 0:
        ca = math.pi - ca
    return ca


class Position:
    """
    A point on the globe with the locator precision used to describe it.

    Latitude and longitude are range-checked whenever they are assigned,
    and precision must stay within 1 to 5 pairs. Assigning any of them
    drops the cached locator; assigning the locator recomputes all three.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        precision: int = DEFAULT_PRECISION,
    ):
        self._locator: Optional[str] = None
        self.latitude = latitude
        self.longitude = longitude
        self.precision = precision

    @classmethod
    def from_coordinates(
        cls,
        latitude: float,
        longitude: float,
        precision: int = DEFAULT_PRECISION,
    ) -> "Position":
        """Create a position from decimal-degree coordinates."""
        return cls(latitude, longitude, precision)

    @classmethod
    def from_locator(cls, locator: str, precision: Optional[int] = None) -> "Position":
        """
        Create a position at the centre of a locator's cell.

        The locator is kept verbatim, so ``from_locator("FN31pr").locator``
        is ``"FN31pr"``. When ``precision`` differs from the locator's own
        length, the locator is recomputed at that precision on next read.
        """
        position = cls(0.0, 0.0)
        position.locator = locator
        if precision is not None and precision != position.precision:
            position.precision = precision
        return position

    @property
    def latitude(self) -> float:
        return _significant(self._latitude)

    @latitude.setter
    def latitude(self, value: float):
        self._latitude = range_check("latitude", LATITUDE_LIMIT, value)
        self._locator = None

    @property
    def longitude(self) -> float:
        return _significant(self._longitude)

    @longitude.setter
    def longitude(self, value: float):
        self._longitude = range_check("longitude", LONGITUDE_LIMIT, value)
        self._locator = None

    @property
    def precision(self) -> int:
        return self._precision

    @precision.setter
    def precision(self, value: int):
        self._precision = check_precision(value)
        self._locator = None

    @property
    def locator(self) -> str:
        """The locator of this position, computed on first read."""
        if self._locator is None:
            self._locator = coordinates_to_grid_code(
                self._latitude, self._longitude, self._precision
            )
        return self._locator

    @locator.setter
    def locator(self, value: str):
        if not valid(value):
            logger.debug(f"Rejected locator {value!r}")
            raise InvalidLocator(value)

        self._latitude, self._longitude = grid_code_to_coordinates(value)
        self._precision = len(value) // 2
        self._locator = value

    def replace(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        precision: Optional[int] = None,
    ) -> "Position":
        """Return a new position with the given fields changed."""
        return type(self)(
            self._latitude if latitude is None else latitude,
            self._longitude if longitude is None else longitude,
            self._precision if precision is None else precision,
        )

    def distance_to(self, other: "Position", unit: str = "km") -> float:
        """
        Great-circle distance to another position.

        Args:
            other: Destination position
            unit: ``"km"`` for kilometres or ``"m"`` for metres

        Returns:
            Distance in the requested unit, on a sphere of radius 6371 km

        Raises:
            InvalidUnit: If the unit is not supported
        """
        if unit not in DISTANCE_UNITS:
            raise InvalidUnit(unit)

        radius = EARTH_RADIUS_KM * DISTANCE_UNITS[unit]
        ca = _central_angle(
            degrees_to_radians(self.latitude),
            degrees_to_radians(self.longitude),
            degrees_to_radians(other.latitude),
            degrees_to_radians(other.longitude),
        )
        return radius * ca

    def bearing_to(self, other: "Position") -> int:
        """
        Initial great-circle bearing to another position.

        Args:
            other: Destination position

        Returns:
            Heading in whole degrees clockwise from north, in [0, 360)
        """
        hn = degrees_to_radians(self.latitude)
        he = degrees_to_radians(self.longitude)
        n = degrees_to_radians(other.latitude)
        e = degrees_to_radians(other.longitude)

        ca = _central_angle(hn, he, n, e)

        si = math.sin(e - he) * math.cos(n) * math.cos(hn)
        co = math.sin(n) - math.sin(hn) * math.cos(ca)

        if co == 0:
            # Due east or west, or no direction at all for identical points
            az = 0.0 if si == 0 else math.pi / 2
        else:
            az = math.atan(abs(si / co))

        if co < 0:
            az = math.pi - az
        if si < 0:
            az = -az
        if az < 0:
            az += 2 * math.pi

        return math.floor(radians_to_degrees(az) + 0.5) % 360

    def compass_bearing_to(self, other: "Position") -> str:
        """Compass-point label of the bearing to another position."""
        return compass_bearing(self.bearing_to(other))

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._latitude == other._latitude
            and self._longitude == other._longitude
            and self._precision == other._precision
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}(latitude={self.latitude}, "
            f"longitude={self.longitude}, precision={self.precision}, "
            f"locator={self.locator!r})"
        )


def from_coordinates(
    latitude: float,
    longitude: float,
    precision: int = DEFAULT_PRECISION,
) -> Position:
    """Create a Position from decimal-degree coordinates."""
    return Position.from_coordinates(latitude, longitude, precision)


def from_locator(locator: str, precision: Optional[int] = None) -> Position:
    """Create a Position from a Maidenhead locator."""
    return Position.from_locator(locator, precision)
