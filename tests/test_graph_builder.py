import pytest

from road_network.domain.models import Point, Way
from road_network.graph.builder import (
    RoadGraph,
    build_graph,
    segment_cost,
    segment_distance,
)

from conftest import STEP, chain_way, line_points

A = Point(id=1, lat=0, lon=0)
B = Point(id=2, lat=100_000, lon=0)


def assert_symmetric(graph: RoadGraph) -> None:
    for tail_id, heads in graph.edges.items():
        for head_id, (cost, flag) in heads.items():
            assert graph.edges[head_id][tail_id] == (cost, flag)


def assert_consistent(graph: RoadGraph) -> None:
    for tail_id, heads in graph.edges.items():
        assert tail_id in graph.nodes
        for head_id in heads:
            assert head_id in graph.nodes
    for node_id in graph.nodes:
        assert graph.edges.get(node_id)
    assert set(graph.raw_node_ids) == set(graph.nodes)
    assert len(graph.raw_node_ids) == len(graph.nodes)


def test_segment_distance_along_meridian():
    assert segment_distance(A, B) == pytest.approx(1112.29)


def test_segment_distance_along_parallel():
    east = Point(id=3, lat=0, lon=100_000)
    assert segment_distance(A, east) == pytest.approx(716.95)


def test_segment_distance_is_symmetric():
    c = Point(id=3, lat=12_345, lon=-67_890)
    assert segment_distance(A, c) == segment_distance(c, A)


def test_segment_cost_floors_seconds():
    # 1112.29 m at 30 km/h is 133.47 s
    assert segment_cost(A, B, 30) == 133
    assert segment_cost(A, B, 110) == 36


def test_segment_cost_is_deterministic():
    assert segment_cost(A, B, 50) == segment_cost(A, B, 50)


def test_segment_cost_can_floor_to_zero():
    near = Point(id=2, lat=1, lon=0)
    assert segment_cost(A, near, 110) == 0


def test_single_residential_way_yields_bidirectional_edge():
    graph = build_graph({1: A, 2: B}, [Way(id=1, speed=30, refs=(1, 2))])

    assert graph.edges[1][2] == (133, False)
    assert graph.edges[2][1] == (133, False)
    assert graph.nodes == {1: A, 2: B}


def test_unreferenced_point_is_pruned():
    c = Point(id=3, lat=500_000, lon=500_000)

    graph = build_graph({1: A, 2: B, 3: c}, [Way(id=1, speed=30, refs=(1, 2))])

    assert 3 not in graph.nodes
    assert 3 not in graph.raw_node_ids
    assert_consistent(graph)


def test_input_point_mapping_is_not_modified():
    points = {1: A, 2: B, 3: Point(id=3, lat=1, lon=1)}

    build_graph(points, [Way(id=1, speed=30, refs=(1, 2))])

    assert set(points) == {1, 2, 3}


def test_missing_reference_skips_only_that_segment():
    points = line_points([1, 2, 3, 4])
    way = Way(id=1, speed=30, refs=(1, 2, 99, 3, 4))

    graph = build_graph(points, [way])

    assert set(graph.edges[1]) == {2}
    assert set(graph.edges[2]) == {1}
    assert set(graph.edges[3]) == {4}
    assert 99 not in graph.edges
    assert_consistent(graph)


def test_way_with_no_resolvable_segment_is_still_retained():
    points = line_points([1, 2])
    ways = [chain_way(1, [1, 2]), chain_way(2, [50, 51]), chain_way(3, [1])]

    graph = build_graph(points, ways)

    assert graph.raw_ways == ways
    assert set(graph.nodes) == {1, 2}


def test_repeated_consecutive_reference_gives_zero_cost_self_edge():
    points = line_points([1, 2])

    graph = build_graph(points, [chain_way(1, [1, 1, 2])])

    assert graph.edges[1][1] == (0, False)
    assert 2 in graph.edges[1]
    assert_symmetric(graph)


def test_self_edge_alone_keeps_the_point():
    graph = build_graph(line_points([1]), [chain_way(1, [1, 1])])

    assert graph.edges == {1: {1: (0, False)}}
    assert graph.raw_node_ids == [1]


def test_shared_segment_takes_last_written_cost():
    graph = build_graph(
        {1: A, 2: B},
        [Way(id=1, speed=30, refs=(1, 2)), Way(id=2, speed=110, refs=(2, 1))],
    )

    assert graph.edge(1, 2) == (36, False)
    assert graph.edge(2, 1) == (36, False)


def test_shared_segment_last_write_wins_even_when_slower():
    graph = build_graph(
        {1: A, 2: B},
        [Way(id=1, speed=110, refs=(1, 2)), Way(id=2, speed=30, refs=(1, 2))],
    )

    assert graph.edge(1, 2) == (133, False)


def test_edges_are_symmetric_and_consistent_over_several_ways():
    points = line_points(range(1, 9))
    points[9] = Point(id=9, lat=3 * STEP, lon=STEP)
    ways = [
        chain_way(1, [1, 2, 3, 4, 5], speed=50),
        chain_way(2, [4, 9, 6], speed=10),
        chain_way(3, [6, 7, 8, 2], speed=110),
    ]

    graph = build_graph(points, ways)

    assert_symmetric(graph)
    assert_consistent(graph)
    assert all(flag is False for heads in graph.edges.values() for _, flag in heads.values())


def test_graph_accessors():
    graph = build_graph(line_points([1, 2, 3]), [chain_way(1, [1, 2, 3])])

    assert len(graph) == 3
    assert 2 in graph
    assert 42 not in graph
    assert graph.node(2) == Point(id=2, lat=STEP, lon=0)
    assert graph.node(42) is None
    assert sorted(head for head, _, _ in graph.neighbors(2)) == [1, 3]
    assert list(graph.neighbors(42)) == []
    assert graph.edge(1, 3) is None
    assert graph.edge_count == 4


def test_empty_input_builds_empty_graph():
    graph = build_graph({}, [])

    assert graph.nodes == {}
    assert graph.edges == {}
    assert graph.raw_ways == []
    assert graph.raw_node_ids == []
