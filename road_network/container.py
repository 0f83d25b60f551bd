"""Dependency injection container.

Explicit registration and resolution of adapters, without external
frameworks. Adapters are instantiated on first use.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(RoadNetworkService)

        # Testing
        container = Container()
        container.register(OsmSourcePort, lambda: FakeSource())
        source = container.resolve(OsmSourcePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
                self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.
        """
        from .adapters.graph import DijkstraTraversalOracle
        from .adapters.osm import PyosmiumOsmReader
        from .ports.osm import OsmSourcePort
        from .services import RoadNetworkService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            OsmSourcePort,
            lambda: PyosmiumOsmReader(config.graph),
        )

        def create_network_service() -> RoadNetworkService:
            return RoadNetworkService(
                source=container.resolve(OsmSourcePort),
                oracle_factory=DijkstraTraversalOracle,
                reduce=config.graph.reduce_to_largest_component,
            )

        container.register(RoadNetworkService, create_network_service)

        return container
