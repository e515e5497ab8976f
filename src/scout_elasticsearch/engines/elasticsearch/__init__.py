"""Elasticsearch engine driver."""

from scout_elasticsearch.engines.elasticsearch.bulk import Bulk
from scout_elasticsearch.engines.elasticsearch.engine import ElasticsearchEngine

__all__ = ["Bulk", "ElasticsearchEngine"]
