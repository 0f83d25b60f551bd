"""Immutable domain models for the road network.

Coordinates are stored as fixed-point integers (degrees scaled by 10^7)
so that points hash and compare exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

COORD_SCALE = 10**7


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A geolocated OSM node.

    Equality, hashing and ordering use the (id, lat, lon) tuple.

    Attributes:
        id: OSM node identifier
        lat: Latitude in degrees * 10^7
        lon: Longitude in degrees * 10^7
    """

    id: int
    lat: int
    lon: int

    @classmethod
    def from_degrees(cls, id: int, lat: float, lon: float) -> Point:
        """Build a point from floating degrees, truncating toward zero."""
        return cls(id=id, lat=int(lat * COORD_SCALE), lon=int(lon * COORD_SCALE))

    @property
    def latitude(self) -> float:
        return self.lat / COORD_SCALE

    @property
    def longitude(self) -> float:
        return self.lon / COORD_SCALE


@dataclass(frozen=True, slots=True)
class Way:
    """A classified road segment chain.

    Attributes:
        id: OSM way identifier
        speed: Free-flow speed in km/h from the classification table
        refs: Ordered point ids the way connects
    """

    id: int
    speed: int
    refs: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class RawWay:
    """A way as decoded from the input file, before classification.

    Attributes:
        id: OSM way identifier
        highway: Road-type tag value, or None when the way has no tag
        refs: Ordered point ids the way connects
    """

    id: int
    highway: Optional[str]
    refs: tuple[int, ...] = field(default_factory=tuple)
