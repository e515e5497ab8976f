"""scout-elasticsearch — Elasticsearch driver for a search abstraction layer."""

from scout_elasticsearch.engines.base.engine import SearchEngine
from scout_elasticsearch.engines.base.exceptions import (
    BulkOperationError,
    ConfigurationError,
    EngineError,
    EngineNotFoundError,
    UnsupportedOperation,
)
from scout_elasticsearch.engines.base.manager import EngineManager
from scout_elasticsearch.engines.elasticsearch.engine import ElasticsearchEngine
from scout_elasticsearch.models.query import SearchQuery, SortDirection, SortOrder
from scout_elasticsearch.provider import ElasticsearchProvider

__version__ = "0.1.0"

__all__ = [
    "BulkOperationError",
    "ConfigurationError",
    "ElasticsearchEngine",
    "ElasticsearchProvider",
    "EngineError",
    "EngineManager",
    "EngineNotFoundError",
    "SearchEngine",
    "SearchQuery",
    "SortDirection",
    "SortOrder",
    "UnsupportedOperation",
    "__version__",
]
