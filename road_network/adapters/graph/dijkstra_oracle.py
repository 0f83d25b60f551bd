"""Dijkstra traversal oracle adapter.

Implements TraversalOraclePort with a binary-heap Dijkstra over the
adjacency of a RoadGraph. Each instance holds the state of one search;
build a new one for every probe.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Mapping, Optional, Set, Tuple

from ...domain.errors import NodeNotFoundError
from ...graph.builder import RoadGraph


@dataclass
class DijkstraTraversalOracle:
    """Single-source search engine over a road graph.

    Attributes:
        graph: The graph to explore. Read only.
        visited_nodes: Settled node id -> cost in seconds from the last source
    """

    graph: RoadGraph
    visited_nodes: Dict[int, int] = field(default_factory=dict)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def pick_unvisited(self, visited: Mapping[int, int]) -> Optional[int]:
        """Return the first node, in construction order, not in ``visited``."""
        for node_id in self.graph.raw_node_ids:
            if node_id not in visited:
                return node_id
        return None

    def traverse(
        self,
        source: int,
        target: Optional[int] = None,
        region_filter: Optional[AbstractSet[int]] = None,
        respect_flag: bool = False,
    ) -> Set[int]:
        """Run Dijkstra from ``source`` and return the settled node ids.

        Raises:
            NodeNotFoundError: If ``source`` is not a node of the graph.
        """
        if source not in self.graph:
            raise NodeNotFoundError(
                f"Source node not in graph: {source}",
                node_id=source,
            )

        distances: Dict[int, int] = {source: 0}
        settled: Dict[int, int] = {}
        heap: List[Tuple[int, int]] = [(0, source)]

        while heap:
            cost, u = heapq.heappop(heap)

            if u in settled:
                continue

            settled[u] = cost

            if target is not None and u == target:
                break

            for v, weight, flag in self.graph.neighbors(u):
                if respect_flag and not flag:
                    continue
                if region_filter is not None and v not in region_filter:
                    continue
                new_cost = cost + weight
                if v not in distances or new_cost < distances[v]:
                    distances[v] = new_cost
                    heapq.heappush(heap, (new_cost, v))

        self.visited_nodes = settled
        self._logger.debug(
            "Traversal finished",
            extra={"source": source, "settled": len(settled)},
        )
        return set(settled)

    def distance_to(self, node_id: int) -> Optional[int]:
        """Cost of ``node_id`` from the last traversal's source, if settled."""
        return self.visited_nodes.get(node_id)
