"""Graph ports - Abstractions for single-source traversal.

The connectivity reducer drives an external search engine through this
contract. One oracle is constructed per probe from the graph it explores.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping, Optional, Protocol, Set


class TraversalOraclePort(Protocol):
    """Port for single-source exploration of a road graph.

    Implementation: adapters/graph/dijkstra_oracle.py
    """

    def pick_unvisited(self, visited: Mapping[int, int]) -> Optional[int]:
        """Pick a graph node that is not a key of ``visited``.

        Args:
            visited: Node id -> iteration counter of the probe that reached it.

        Returns:
            A node id, or None once every node has been visited.
        """
        ...

    def traverse(
        self,
        source: int,
        target: Optional[int] = None,
        region_filter: Optional[AbstractSet[int]] = None,
        respect_flag: bool = False,
    ) -> Set[int]:
        """Explore the graph from ``source``.

        Args:
            source: Start node id.
            target: Node id at which to stop, or None to explore everything
                reachable.
            region_filter: Restrict the search to these node ids.
            respect_flag: Only follow arcs whose preprocessing flag is set.

        Returns:
            The ids of all settled nodes, source included.
        """
        ...
