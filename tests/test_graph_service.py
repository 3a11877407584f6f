"""Scenario tests for GraphService and the default container."""

import math

import pytest

from pathfinder.adapters.graph import BellmanFordEngine, DijkstraEngine, EdgeListRepository
from pathfinder.config import AppConfig, GraphConfig
from pathfinder.container import Container
from pathfinder.domain.errors import NegativeCycleError
from pathfinder.graph import Graph
from pathfinder.ports.graph import (
    EdgeListRepositoryPort,
    NegativeCycleAwareEnginePort,
    ShortestPathEnginePort,
)
from pathfinder.services import GraphService


@pytest.fixture
def service(tmp_path):
    return GraphService(
        repository=EdgeListRepository(GraphConfig(data_dir=tmp_path)),
        dijkstra=DijkstraEngine(),
        bellman_ford=BellmanFordEngine(),
    )


@pytest.fixture
def scenario(service):
    service.add_edge(1, 2, 4)
    service.add_edge(2, 3, 1)
    return service


def test_dijkstra_scenario(scenario):
    result = scenario.run_dijkstra(1)

    assert result.distances == {1: 0, 2: 4, 3: 5}
    assert result.predecessor(2) == 1
    assert result.predecessor(3) == 2


def test_remove_edge_scenario(scenario):
    scenario.remove_edge(2, 3)

    result = scenario.run_dijkstra(1)

    assert result.distance(1) == 0
    assert result.distance(2) == 4
    assert math.isinf(result.distance(3))


def test_negative_edge_scenario(scenario):
    scenario.add_edge(1, 3, -10)

    with pytest.raises(NegativeCycleError):
        scenario.run_bellman_ford(1)
    assert scenario.run_bellman_ford_safe(1) is None


def test_engines_agree_after_updates(scenario):
    scenario.add_edge(1, 3, 2)
    scenario.update_edge_weight(1, 2, 1)
    scenario.add_edge(3, 4, 6)

    dijkstra = scenario.run_dijkstra(1)
    bellman_ford = scenario.run_bellman_ford(1)

    assert dijkstra.distances == bellman_ford.distances
    assert dijkstra.distances == {1: 0, 2: 1, 3: 2, 4: 8}


def test_load_and_export(service, tmp_path):
    source = tmp_path / "edges.txt"
    source.write_text("0 1\n1 2\nbad line here\n", encoding="utf-8")

    report = service.load(source)
    written = service.export(tmp_path / "out.edgelist")

    assert report.edges_added == 2
    assert report.num_skipped == 1
    assert written == 4
    assert service.run_dijkstra(0).distances == {0: 0, 1: 1, 2: 2}


def test_load_missing_file_keeps_graph(scenario, tmp_path):
    report = scenario.load(tmp_path / "absent.gz")

    assert not report.found
    assert scenario.graph.edge_count == 4


def test_default_container_wires_service(tmp_path):
    config = AppConfig(graph=GraphConfig(data_dir=tmp_path))
    container = Container.create_default(config)

    service = container.resolve(GraphService)

    assert isinstance(service.dijkstra, DijkstraEngine)
    assert isinstance(service.bellman_ford, BellmanFordEngine)
    assert isinstance(service.repository, EdgeListRepository)
    assert service.repository.config.data_dir == tmp_path
    # Graph store is shared
    assert container.resolve(Graph) is service.graph
    assert container.resolve(GraphService) is service


def test_container_register_override():
    container = Container(config=AppConfig())

    class FakeEngine:
        def shortest_paths(self, graph, start):
            return None

    container.register(ShortestPathEnginePort, FakeEngine, singleton=False)

    first = container.resolve(ShortestPathEnginePort)
    second = container.resolve(ShortestPathEnginePort)

    assert isinstance(first, FakeEngine)
    assert first is not second


def test_container_unknown_type_raises():
    container = Container(config=AppConfig())

    with pytest.raises(KeyError):
        container.resolve(EdgeListRepositoryPort)


def test_container_reregister_drops_cached_instance():
    container = Container.create_default(AppConfig())
    default_engine = container.resolve(NegativeCycleAwareEnginePort)

    replacement = BellmanFordEngine()
    container.register(NegativeCycleAwareEnginePort, lambda: replacement)

    assert container.resolve(NegativeCycleAwareEnginePort) is replacement
    assert replacement is not default_engine
