"""
Maidenhead data models using Pydantic.

These models describe grid cells produced by the codec and the
reference locator fixtures used to check it.
"""

from typing import List, Tuple

import yaml
from pydantic import BaseModel, Field


class GridCell(BaseModel):
    """The rectangle of the globe covered by a locator."""

    locator: str = Field(..., description="Locator the cell was computed from")
    south: float = Field(..., description="Southern edge latitude")
    north: float = Field(..., description="Northern edge latitude")
    west: float = Field(..., description="Western edge longitude")
    east: float = Field(..., description="Eastern edge longitude")
    latitude: float = Field(..., description="Latitude of the cell centre")
    longitude: float = Field(..., description="Longitude of the cell centre")

    @property
    def height(self) -> float:
        """Cell height in degrees of latitude."""
        return self.north - self.south

    @property
    def width(self) -> float:
        """Cell width in degrees of longitude."""
        return self.east - self.west

    def contains(self, latitude: float, longitude: float) -> bool:
        """Check whether a point lies inside the cell, edges included."""
        return (
            self.south <= latitude <= self.north
            and self.west <= longitude <= self.east
        )

    def to_list(self) -> List[float]:
        """Convert to [south, west, north, east] list."""
        return [self.south, self.west, self.north, self.east]


class ReferenceLocator(BaseModel):
    """A known location and the locator it must encode to."""

    name: str = Field(..., description="Place name")
    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude in decimal degrees")
    locator: str = Field(..., description="Expected locator")

    @property
    def precision(self) -> int:
        """Number of locator pairs in the expected locator."""
        return len(self.locator) // 2

    def as_tuple(self) -> Tuple[float, float, str]:
        """Unpack into (latitude, longitude, locator)."""
        return self.latitude, self.longitude, self.locator


class ReferenceSet(BaseModel):
    """A collection of reference locators loaded from configuration."""

    references: List[ReferenceLocator] = Field(
        default_factory=list, description="Reference locations"
    )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ReferenceSet":
        """Load reference locators from a YAML file."""
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))
