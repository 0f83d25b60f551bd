"""Domain layer: core models, classification and errors."""

from .classification import SPEED_TABLE, classify_ways, speed_for
from .errors import (
    ConfigurationError,
    NodeNotFoundError,
    OsmReadError,
    RoadNetworkError,
)
from .models import Point, RawWay, Way

__all__ = [
    "ConfigurationError",
    "NodeNotFoundError",
    "OsmReadError",
    "Point",
    "RawWay",
    "RoadNetworkError",
    "SPEED_TABLE",
    "Way",
    "classify_ways",
    "speed_for",
]
