"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock

import pytest

from scout_elasticsearch.config.settings import Settings
from scout_elasticsearch.engines.elasticsearch.engine import ElasticsearchEngine
from scout_elasticsearch.models.query import SearchQuery


@dataclass
class Article:
    """Minimal searchable record used across the tests."""

    id: int
    title: str
    tags: list[str] = field(default_factory=list)

    @classmethod
    def searchable_as(cls) -> str:
        return "articles"

    def get_search_key(self) -> int:
        return self.id

    def to_searchable_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "tags": self.tags}


class ArticleLookup:
    """In-memory lookup resolving ids to ``Article`` records."""

    def __init__(self, articles: Sequence[Article]) -> None:
        self.articles = {str(a.id): a for a in articles}
        self.calls: list[tuple[SearchQuery, list[str]]] = []

    async def get_models_by_ids(self, query: SearchQuery, ids: Sequence[str]) -> list[Article]:
        self.calls.append((query, list(ids)))
        return [self.articles[i] for i in ids if i in self.articles]


def make_response(ids: Sequence[str], total: int | None = None) -> dict[str, Any]:
    """Build a search response body shaped like Elasticsearch 8."""
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": len(ids) if total is None else total, "relation": "eq"},
            "max_score": 1.0,
            "hits": [
                {"_index": "articles", "_id": doc_id, "_score": 1.0, "_source": {"id": doc_id}}
                for doc_id in ids
            ],
        },
    }


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def articles() -> list[Article]:
    return [
        Article(id=1, title="Advances in Solar Nowcasting", tags=["solar", "energy"]),
        Article(id=2, title="Transformer Models for NLU", tags=["nlp"]),
        Article(id=3, title="Graph Neural Networks for Drug Discovery", tags=["gnn"]),
    ]


@pytest.fixture
def mock_client() -> AsyncMock:
    """AsyncElasticsearch stand-in with successful default responses."""
    client = AsyncMock()
    client.bulk.return_value = {"took": 2, "errors": False, "items": []}
    client.search.return_value = make_response([])
    client.delete_by_query.return_value = {"deleted": 0}
    return client


@pytest.fixture
def engine(mock_client: AsyncMock) -> ElasticsearchEngine:
    return ElasticsearchEngine(mock_client)


@pytest.fixture
def query() -> SearchQuery:
    return SearchQuery(index="articles", query="solar")


@pytest.fixture
def hits():
    """Factory for search response bodies: ``hits(["1", "2"], total=95)``."""
    return make_response


@pytest.fixture
def lookup_for():
    """Factory for lookups resolving only the given articles."""
    return ArticleLookup
