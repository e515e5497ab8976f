"""Tests for the engine manager."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from scout_elasticsearch.engines.base.exceptions import EngineNotFoundError
from scout_elasticsearch.engines.base.manager import EngineManager
from scout_elasticsearch.engines.elasticsearch.engine import ElasticsearchEngine


class TestEngineManager:
    def test_resolves_registered_driver(self, mock_client) -> None:
        manager = EngineManager()
        manager.extend("elasticsearch", lambda m: ElasticsearchEngine(mock_client))

        engine = manager.engine("elasticsearch")

        assert isinstance(engine, ElasticsearchEngine)
        assert engine.client is mock_client
        assert manager.registered_drivers == ["elasticsearch"]
        assert manager.resolved_engines == ["elasticsearch"]

    def test_engine_is_cached_per_driver(self) -> None:
        factory = MagicMock(side_effect=lambda m: MagicMock())
        manager = EngineManager()
        manager.extend("es", factory)

        assert manager.engine("es") is manager.engine("es")
        factory.assert_called_once_with(manager)

    def test_default_driver(self) -> None:
        manager = EngineManager(default_driver="es")
        manager.extend("es", lambda m: MagicMock(name="engine"))
        assert manager.engine() is manager.engine("es")

    def test_unknown_driver_raises(self) -> None:
        manager = EngineManager()
        manager.extend("es", lambda m: MagicMock())
        with pytest.raises(EngineNotFoundError, match="Available drivers: \\['es'\\]"):
            manager.engine("solr")

    def test_no_driver_requested_raises(self) -> None:
        with pytest.raises(EngineNotFoundError):
            EngineManager().engine()

    def test_re_register_replaces_cached_engine(self) -> None:
        manager = EngineManager()
        manager.extend("es", lambda m: "first")
        assert manager.engine("es") == "first"

        manager.extend("es", lambda m: "second")
        assert manager.engine("es") == "second"

    def test_forget_engines(self) -> None:
        factory = MagicMock(side_effect=lambda m: object())
        manager = EngineManager()
        manager.extend("es", factory)
        manager.engine("es")

        manager.forget_engines()
        manager.engine("es")

        assert factory.call_count == 2
