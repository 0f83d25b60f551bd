"""Reduction of a road graph to its largest connected component.

Components are discovered by repeated single-source traversals: every
node reached from the n-th probed source is tagged with counter n. The
loop stops when no unvisited node remains, or as soon as more than half
of the graph has been tagged. That shortcut can miss the largest
component when several small ones are found first; it is kept because
real road networks have one dominant component.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..domain.models import Point
from ..ports.graph import TraversalOraclePort
from .builder import RoadGraph, build_graph

logger = logging.getLogger(__name__)

OracleFactory = Callable[[RoadGraph], TraversalOraclePort]


def _default_oracle_factory() -> OracleFactory:
    from ..adapters.graph import DijkstraTraversalOracle

    return DijkstraTraversalOracle


def _group_by_counter(visited: Dict[int, int]) -> List[List[int]]:
    groups: Dict[int, List[int]] = {}
    for node_id, counter in visited.items():
        groups.setdefault(counter, []).append(node_id)
    return [groups[counter] for counter in sorted(groups)]


def reduce_to_largest_component(
    graph: RoadGraph,
    oracle_factory: Optional[OracleFactory] = None,
) -> RoadGraph:
    """Return a new graph restricted to the largest connected component.

    Args:
        graph: The graph to reduce. Not modified.
        oracle_factory: Builds a traversal oracle for a graph. A fresh
            oracle is built for every probe. Defaults to Dijkstra.

    Returns:
        A graph rebuilt from the winning component's points and the
        original ``raw_ways``.
    """
    factory = oracle_factory or _default_oracle_factory()
    visited: Dict[int, int] = {}
    counter = 0
    half = len(graph.nodes) // 2

    picker = factory(graph)
    while True:
        source_id = picker.pick_unvisited(visited)
        if source_id is None:
            break

        counter += 1
        oracle = factory(graph)
        reached = oracle.traverse(source_id, None, None, False)
        for node_id in reached:
            visited[node_id] = counter

        logger.debug(
            "Component probe",
            extra={"probe": counter, "source": source_id, "reached": len(reached)},
        )

        if len(visited) > half:
            break

    largest: List[int] = []
    for group in _group_by_counter(visited):
        # Strict comparison keeps the earliest group on ties.
        if len(group) > len(largest):
            largest = group

    points: Dict[int, Point] = {node_id: graph.nodes[node_id] for node_id in largest}

    logger.info(
        "Reduced to largest component",
        extra={
            "probes": counter,
            "nodes_before": len(graph.nodes),
            "nodes_after": len(points),
        },
    )
    return build_graph(points, graph.raw_ways)
