"""Road graph construction from classified ways.

Each consecutive pair of way references becomes a pair of opposite arcs
weighted by the time, in whole seconds, needed to drive the segment at
the way's free-flow speed. Points left without any arc are pruned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..domain.models import Point, Way

logger = logging.getLogger(__name__)

# Planar approximation of one degree, in meters.
METERS_PER_DEGREE_LAT = 111229
METERS_PER_DEGREE_LON = 71695

# Fixed-point coordinates carry a 10^7 factor, squared in the distance.
_SQUARED_SCALE = 10.0**14

# tail id -> head id -> (cost in seconds, preprocessing flag)
Edges = Dict[int, Dict[int, Tuple[int, bool]]]


@dataclass(frozen=True)
class RoadGraph:
    """Bidirectional weighted road graph.

    Built once by ``build_graph`` and never mutated afterwards; reductions
    produce a new instance.

    Attributes:
        nodes: Point id -> Point, only points with at least one arc
        edges: Adjacency, tail id -> head id -> (cost, flag)
        raw_ways: The way list the graph was built from, unmodified
        raw_node_ids: Node ids at construction time, in stable order
    """

    nodes: Dict[int, Point]
    edges: Edges
    raw_ways: List[Way]
    raw_node_ids: List[int]

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def node(self, node_id: int) -> Optional[Point]:
        """Return the point for an id, or None if it is not in the graph."""
        return self.nodes.get(node_id)

    def neighbors(self, node_id: int) -> Iterator[Tuple[int, int, bool]]:
        """Yield ``(head_id, cost, flag)`` for every arc leaving a node."""
        for head_id, (cost, flag) in self.edges.get(node_id, {}).items():
            yield head_id, cost, flag

    def edge(self, tail_id: int, head_id: int) -> Optional[Tuple[int, bool]]:
        """Return ``(cost, flag)`` for an arc, or None if absent."""
        return self.edges.get(tail_id, {}).get(head_id)

    @property
    def edge_count(self) -> int:
        """Number of directed arcs."""
        return sum(len(heads) for heads in self.edges.values())


def segment_distance(tail: Point, head: Point) -> float:
    """Approximate distance between two points in meters.

    Uses fixed meters-per-degree factors rather than a great-circle
    formula, so error grows away from mid latitudes.
    """
    a = ((head.lat - tail.lat) * METERS_PER_DEGREE_LAT) ** 2 / _SQUARED_SCALE
    b = ((head.lon - tail.lon) * METERS_PER_DEGREE_LON) ** 2 / _SQUARED_SCALE
    return math.sqrt(a + b)


def segment_cost(tail: Point, head: Point, speed: int) -> int:
    """Seconds needed to traverse a segment at ``speed`` km/h, floored.

    Short fast segments can floor to zero.
    """
    meters_per_second = speed * 5 / 18
    return int(segment_distance(tail, head) / meters_per_second)


def _add_arc(edges: Edges, tail_id: int, head_id: int, cost: int) -> None:
    # Last write wins when several ways share a segment.
    edges.setdefault(tail_id, {})[head_id] = (cost, False)


def build_graph(points: Mapping[int, Point], ways: Sequence[Way]) -> RoadGraph:
    """Build a road graph from points and classified ways.

    Args:
        points: Point id -> Point. Not modified.
        ways: Ways carrying a valid speed. Kept as ``raw_ways``.

    Returns:
        A RoadGraph whose nodes are the points touched by at least one
        resolved segment.
    """
    nodes: Dict[int, Point] = dict(points)
    edges: Edges = {}
    added = 0
    skipped = 0

    for way in ways:
        refs = way.refs
        # The previous head is the next tail.
        cached_head: Optional[Point] = None
        cached_index = -1

        for i in range(len(refs) - 1):
            tail_id = refs[i]
            head_id = refs[i + 1]

            if cached_head is not None and cached_index == i:
                tail: Optional[Point] = cached_head
            else:
                tail = nodes.get(tail_id)
            head = nodes.get(head_id)

            if tail is None or head is None:
                skipped += 1
                continue

            cost = segment_cost(tail, head, way.speed)
            _add_arc(edges, tail_id, head_id, cost)
            _add_arc(edges, head_id, tail_id, cost)
            added += 1

            cached_head = head
            cached_index = i + 1

    orphans = [node_id for node_id in nodes if node_id not in edges]
    for node_id in orphans:
        del nodes[node_id]

    logger.debug(
        "Graph built",
        extra={
            "ways": len(ways),
            "segments": added,
            "skipped_segments": skipped,
            "pruned_points": len(orphans),
            "nodes": len(nodes),
        },
    )

    return RoadGraph(
        nodes=nodes,
        edges=edges,
        raw_ways=list(ways),
        raw_node_ids=list(nodes),
    )
