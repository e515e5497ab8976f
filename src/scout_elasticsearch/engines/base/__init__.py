"""Base engine interface — Abstract contract and driver registry."""

from scout_elasticsearch.engines.base.engine import SearchEngine
from scout_elasticsearch.engines.base.manager import EngineManager

__all__ = ["EngineManager", "SearchEngine"]
