"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraTraversalOracle: Single-source search over a RoadGraph
"""

from .dijkstra_oracle import DijkstraTraversalOracle

__all__ = ["DijkstraTraversalOracle"]
