"""
Point codec.

Converts wire-format (latitude, longitude) pairs in degrees into the
rendering engine's native coordinate type, which stores angles in radians,
and into the canonical "<lat>,<lon>" text used by marker specs.
"""

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from ..constants import COORDINATE_PRECISION


@dataclass(frozen=True)
class Point:
    """A latitude/longitude pair in degrees. No range checking is done."""
    
    lat: float
    lon: float
    
    def __str__(self) -> str:
        return to_canonical_string(self)


@dataclass(frozen=True)
class LatLng:
    """Engine-native coordinate: latitude and longitude in radians."""
    
    lat: float
    lng: float
    
    @property
    def lat_degrees(self) -> float:
        return float(np.rad2deg(self.lat))
    
    @property
    def lng_degrees(self) -> float:
        return float(np.rad2deg(self.lng))
    
    @classmethod
    def from_degrees(cls, lat: float, lng: float) -> "LatLng":
        return cls(float(np.deg2rad(lat)), float(np.deg2rad(lng)))


def to_engine_coordinate(point: Point) -> LatLng:
    """
    Convert a degree pair to the engine's coordinate type.
    
    Total over finite inputs; values are passed through without clamping
    or wrapping.
    """
    return LatLng.from_degrees(point.lat, point.lon)


def to_engine_coordinates(points: Iterable[Point]) -> List[LatLng]:
    """Convert a sequence of points, preserving order."""
    points = list(points)
    if not points:
        return []
    
    radians = np.deg2rad(np.array([[p.lat, p.lon] for p in points], dtype=float))
    return [LatLng(float(lat), float(lng)) for lat, lng in radians]


def to_canonical_string(point: Point) -> str:
    """
    Format a point as "<lat>,<lon>" with six fractional digits.
    
    Example:
        >>> to_canonical_string(Point(45.0, -122.0))
        '45.000000,-122.000000'
    """
    return f"{point.lat:.{COORDINATE_PRECISION}f},{point.lon:.{COORDINATE_PRECISION}f}"
