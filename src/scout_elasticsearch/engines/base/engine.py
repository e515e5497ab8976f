"""Base search engine — Abstract contract the host search abstraction calls.

Every engine driver must implement this interface. An engine is
responsible for:
  1. Writing and removing records in the backend index
  2. Translating a ``SearchQuery`` into a backend request
  3. Mapping raw backend results back to the host's records
  4. Reporting totals and hit ids from raw results
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from scout_elasticsearch.models.query import SearchQuery
from scout_elasticsearch.models.searchable import ModelLookup, Searchable


class SearchEngine(ABC):
    """Abstract base class for search engine drivers.

    Engines hold their backend connection from construction and are
    otherwise stateless between calls. Connection pooling, retries and
    timeouts belong to the connection, not the engine.

    Every cluster-facing method is a coroutine, including the ones a
    driver does not support: those raise ``UnsupportedOperation`` when
    awaited, before any request is made. Calling them without ``await``
    only creates the coroutine.
    """

    @abstractmethod
    async def update(self, models: Sequence[Searchable]) -> None:
        """Add or replace the given records in the index."""

    @abstractmethod
    async def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the given records from the index."""

    @abstractmethod
    async def search(self, query: SearchQuery) -> Any:
        """Execute a search and return the raw backend results."""

    @abstractmethod
    async def paginate(self, query: SearchQuery, per_page: int, page: int) -> Any:
        """Execute a search for one page of results.

        Args:
            query: The query descriptor.
            per_page: Number of hits per page; must be at least 1.
            page: 1-based page number.

        Returns:
            Raw backend results for the requested page.
        """

    @abstractmethod
    def map_ids(self, results: Any) -> list[str]:
        """Pluck the hit ids from raw results, in engine order."""

    @abstractmethod
    async def map(self, query: SearchQuery, results: Any, lookup: ModelLookup) -> list[Searchable]:
        """Map raw results to records, preserving engine order.

        Args:
            query: The query descriptor that produced ``results``.
            results: Raw backend results.
            lookup: Resolves hit ids to records.

        Returns:
            Resolved records; ids the lookup cannot resolve are dropped.
        """

    @abstractmethod
    async def lazy_map(self, query: SearchQuery, results: Any, lookup: ModelLookup) -> Any:
        """Map raw results to a lazily evaluated sequence of records."""

    @abstractmethod
    def get_total_count(self, results: Any) -> int:
        """Total number of matches reported by raw results."""

    @abstractmethod
    async def flush(self, model: Searchable | type[Searchable]) -> None:
        """Remove every record of the model's index."""

    @abstractmethod
    async def create_index(self, name: str, options: dict[str, Any] | None = None) -> Any:
        """Create a search index."""

    @abstractmethod
    async def delete_index(self, name: str) -> Any:
        """Delete a search index."""

    async def keys(self, query: SearchQuery) -> list[str]:
        """Search and return only the matching ids."""
        return self.map_ids(await self.search(query))

    async def get(self, query: SearchQuery, lookup: ModelLookup) -> list[Searchable]:
        """Search and map the results to records in one step."""
        return await self.map(query, await self.search(query), lookup)
