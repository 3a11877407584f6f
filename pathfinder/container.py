"""Dependency wiring for the pipeline.

Maps port types to factories so the pipeline can build a GraphService
without naming concrete adapters, and tests can swap any of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Port type -> factory registry.

    Instances are created on first resolve and reused afterwards unless
    the factory was registered with ``singleton=False``.

    Attributes:
        config: Configuration handed to the default bindings
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _transient: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)
        if singleton:
            self._transient.discard(port_type)
        else:
            self._transient.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Build or return the instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is registered for ``port_type``.
        """
        try:
            factory = self._factories[port_type]
        except KeyError:
            raise KeyError(f"Type not registered: {port_type}") from None

        if port_type in self._transient:
            return factory()
        if port_type not in self._instances:
            self._instances[port_type] = factory()
        return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the edge-list repository, both engines and the service.

        The graph store is shared, so every resolved GraphService works
        on the same graph.
        """
        from .adapters.graph import BellmanFordEngine, DijkstraEngine, EdgeListRepository
        from .graph.store import Graph
        from .ports.graph import (
            EdgeListRepositoryPort,
            NegativeCycleAwareEnginePort,
            ShortestPathEnginePort,
        )
        from .services import GraphService

        config = config or get_config()
        container = cls(config=config)

        container.register(Graph, Graph)
        container.register(
            EdgeListRepositoryPort,
            lambda: EdgeListRepository(config.graph),
        )
        container.register(ShortestPathEnginePort, DijkstraEngine)
        container.register(NegativeCycleAwareEnginePort, BellmanFordEngine)
        container.register(
            GraphService,
            lambda: GraphService(
                repository=container.resolve(EdgeListRepositoryPort),
                dijkstra=container.resolve(ShortestPathEnginePort),
                bellman_ford=container.resolve(NegativeCycleAwareEnginePort),
                graph=container.resolve(Graph),
            ),
        )
        return container
