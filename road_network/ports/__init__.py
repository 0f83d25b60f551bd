"""Ports: contracts for the collaborators the core depends on."""

from .graph import TraversalOraclePort
from .osm import OsmData, OsmSourcePort

__all__ = ["OsmData", "OsmSourcePort", "TraversalOraclePort"]
