"""Unit tests for BellmanFordEngine."""

import math
import random

import pytest

from pathfinder.adapters.graph import BellmanFordEngine, DijkstraEngine
from pathfinder.domain.errors import NegativeCycleError
from pathfinder.domain.models import Edge
from pathfinder.graph import Graph


@pytest.fixture
def engine():
    return BellmanFordEngine()


@pytest.fixture
def path_graph():
    graph = Graph()
    graph.add_edge(1, 2, 4)
    graph.add_edge(2, 3, 1)
    return graph


def test_distances_and_predecessors(engine, path_graph):
    result = engine.shortest_paths(path_graph, 1)

    assert result.distances == {1: 0, 2: 4, 3: 5}
    assert result.predecessors == {1: None, 2: 1, 3: 2}


def test_negative_edge_is_reported_as_cycle(engine, path_graph):
    path_graph.add_edge(1, 3, -10)

    with pytest.raises(NegativeCycleError) as exc_info:
        engine.shortest_paths(path_graph, 1)

    assert exc_info.value.start_node == 1
    assert isinstance(exc_info.value.edge, Edge)
    assert "negative weight cycle" in str(exc_info.value)


def test_safe_variant_returns_none_on_cycle(engine, path_graph):
    path_graph.add_edge(1, 3, -10)

    assert engine.shortest_paths_safe(path_graph, 1) is None
    assert engine.has_negative_cycle(path_graph, 1)


def test_safe_variant_returns_result_without_cycle(engine, path_graph):
    result = engine.shortest_paths_safe(path_graph, 1)

    assert result is not None
    assert result.distance(3) == 5
    assert not engine.has_negative_cycle(path_graph, 1)


def test_unreachable_negative_edge_is_not_a_cycle(engine, path_graph):
    path_graph.add_edge(7, 8, -3)

    result = engine.shortest_paths(path_graph, 1)

    assert math.isinf(result.distance(7))
    assert math.isinf(result.distance(8))


def test_cycle_warning_is_logged(engine, path_graph, caplog):
    path_graph.update_edge_weight(1, 2, -1)

    with caplog.at_level("WARNING"):
        assert engine.shortest_paths_safe(path_graph, 1) is None

    assert "Negative weight cycle detected" in caplog.text


def test_start_absent_from_graph(engine, path_graph):
    result = engine.shortest_paths(path_graph, 99)

    assert result.distances[99] == 0
    assert all(math.isinf(result.distance(n)) for n in (1, 2, 3))


def test_single_node_graph(engine):
    graph = Graph()
    graph.add_edge(1, 1, 3)

    result = engine.shortest_paths(graph, 1)

    assert result.distances == {1: 0}


def test_rerun_is_idempotent(engine, path_graph):
    assert engine.shortest_paths(path_graph, 2) == engine.shortest_paths(path_graph, 2)


def test_agrees_with_dijkstra_on_non_negative_graphs(engine):
    rng = random.Random(7)
    dijkstra = DijkstraEngine()

    for _ in range(20):
        graph = Graph()
        for _ in range(rng.randint(0, 30)):
            graph.add_edge(rng.randint(0, 12), rng.randint(0, 12), rng.randint(0, 9))
        start = rng.randint(0, 12)

        expected = dijkstra.shortest_paths(graph, start)
        result = engine.shortest_paths(graph, start)

        assert result.distances == expected.distances
