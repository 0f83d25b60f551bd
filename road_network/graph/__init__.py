"""Road graph construction and connectivity reduction."""

from .builder import (
    METERS_PER_DEGREE_LAT,
    METERS_PER_DEGREE_LON,
    Edges,
    RoadGraph,
    build_graph,
    segment_cost,
    segment_distance,
)
from .connectivity import OracleFactory, reduce_to_largest_component

__all__ = [
    "Edges",
    "METERS_PER_DEGREE_LAT",
    "METERS_PER_DEGREE_LON",
    "OracleFactory",
    "RoadGraph",
    "build_graph",
    "reduce_to_largest_component",
    "segment_cost",
    "segment_distance",
]
