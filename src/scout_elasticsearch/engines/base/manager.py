"""Engine Manager — Registers engine drivers by name and resolves instances.

Drivers are registered as factories so the host application can defer
building a connection until an engine is first requested. Resolved
engines are cached per driver name.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from scout_elasticsearch.engines.base.engine import SearchEngine
from scout_elasticsearch.engines.base.exceptions import EngineNotFoundError

logger = logging.getLogger(__name__)

EngineFactory = Callable[["EngineManager"], SearchEngine]


class EngineManager:
    """Registry of search engine drivers.

    Example:
        >>> manager = EngineManager(default_driver="elasticsearch")
        >>> manager.extend("elasticsearch", lambda m: ElasticsearchEngine(client))
        >>> engine = manager.engine()
    """

    def __init__(self, default_driver: str | None = None) -> None:
        self.default_driver = default_driver
        self._factories: dict[str, EngineFactory] = {}
        self._engines: dict[str, SearchEngine] = {}

    def extend(self, name: str, factory: EngineFactory) -> None:
        """Register a driver factory.

        Args:
            name: Driver name callers use to request the engine.
            factory: Callable receiving this manager and returning an engine.
        """
        if name in self._factories:
            logger.warning("Overwriting existing engine driver: %s", name)
            self._engines.pop(name, None)
        self._factories[name] = factory
        logger.info("Registered engine driver: %s", name)

    def engine(self, name: str | None = None) -> SearchEngine:
        """Resolve an engine instance by driver name.

        Args:
            name: Driver name. Falls back to ``default_driver`` when omitted.

        Returns:
            The engine for that driver, built on first use.

        Raises:
            EngineNotFoundError: If no driver is registered under the name.
        """
        driver = name or self.default_driver
        if driver is None:
            raise EngineNotFoundError("No engine driver requested and no default driver configured.")

        if driver in self._engines:
            return self._engines[driver]

        if driver not in self._factories:
            raise EngineNotFoundError(
                f"No engine driver registered with name '{driver}'. "
                f"Available drivers: {list(self._factories.keys())}"
            )

        engine = self._factories[driver](self)
        self._engines[driver] = engine
        logger.info("Resolved engine driver: %s", driver)
        return engine

    def forget_engines(self) -> None:
        """Drop every cached engine instance."""
        self._engines.clear()

    @property
    def registered_drivers(self) -> list[str]:
        """List all registered driver names."""
        return list(self._factories.keys())

    @property
    def resolved_engines(self) -> list[str]:
        """List driver names with a cached engine instance."""
        return list(self._engines.keys())
