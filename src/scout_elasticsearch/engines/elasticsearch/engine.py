"""Elasticsearch engine — Bulk indexing and query-DSL search for Elasticsearch (v8+).

Translates the host search abstraction's calls into ``_bulk``,
``_search`` and ``_delete_by_query`` requests made through an injected
``AsyncElasticsearch`` client, and reshapes the responses into hit ids,
totals and records.

Usage::

    engine = ElasticsearchEngine(AsyncElasticsearch("http://localhost:9200"))
    await engine.update(articles)
    results = await engine.search(SearchQuery(index="articles", query="solar"))
    records = await engine.map(query, results, Article.objects)
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping, MutableMapping, Sequence, Set
from typing import TYPE_CHECKING, Any

from scout_elasticsearch.engines.base.engine import SearchEngine
from scout_elasticsearch.engines.base.exceptions import BulkOperationError, UnsupportedOperation
from scout_elasticsearch.engines.elasticsearch.bulk import Bulk
from scout_elasticsearch.models.query import SearchQuery
from scout_elasticsearch.models.searchable import ModelLookup, Searchable

if TYPE_CHECKING:
    from elasticsearch import AsyncElasticsearch

logger = logging.getLogger(__name__)


class ElasticsearchEngine(SearchEngine):
    """Search engine driver backed by Elasticsearch.

    Holds a single client handle and no other state, so one instance can
    serve concurrent calls.

    Args:
        client: A configured ``AsyncElasticsearch`` client. Retries,
            timeouts and TLS are taken from its configuration.
    """

    def __init__(self, client: AsyncElasticsearch) -> None:
        self._client = client

    @property
    def client(self) -> AsyncElasticsearch:
        return self._client

    # ── Indexing ─────────────────────────────────────────────────────────

    async def update(self, models: Sequence[Searchable]) -> None:
        """Index the records in a single bulk request.

        Raises:
            BulkOperationError: If the cluster flags any action as failed.
                The whole call fails even when only some items did.
        """
        models = list(models)
        if not models:
            return

        bulk = Bulk().index(models)
        response = _body(await self._client.bulk(operations=bulk.to_operations()))
        logger.debug("Sent bulk index request with %d actions", len(bulk))

        if response.get("errors"):
            error = BulkOperationError(response)
            logger.error("Bulk update failed for %d of %d records", len(error.failed_items), len(bulk))
            raise error

    async def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the records in a single bulk request.

        The bulk response is not inspected for item errors.
        """
        models = list(models)
        if not models:
            return

        bulk = Bulk().delete(models)
        await self._client.bulk(operations=bulk.to_operations())
        logger.debug("Sent bulk delete request with %d actions", len(bulk))

    async def flush(self, model: Searchable | type[Searchable]) -> None:
        """Delete every document in the model's index."""
        index = model.searchable_as()
        await self._client.delete_by_query(index=index, query={"match_all": {}})
        logger.info("Flushed index: %s", index)

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, query: SearchQuery) -> Any:
        """Run the query, capped at ``query.limit`` hits when set."""
        return await self._perform_search(query, size=query.limit or None)

    async def paginate(self, query: SearchQuery, per_page: int, page: int) -> Any:
        """Run the query for one page and attach the page count as ``nbPages``.

        ``nbPages`` is ``total / per_page`` without rounding, so 95 hits at
        10 per page gives ``9.5``.

        Raises:
            ValueError: If ``per_page`` is less than 1.
        """
        if per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {per_page}")

        results = await self._perform_search(query, from_=page * per_page - per_page, size=per_page)

        if isinstance(results, MutableMapping) and "hits" in results:
            results["nbPages"] = self.get_total_count(results) / per_page

        return results

    def build_search_params(
        self,
        query: SearchQuery,
        from_: int | None = None,
        size: int | None = None,
    ) -> dict[str, Any]:
        """Build the ``search`` request for a query descriptor.

        The free-text query is wrapped as a ``*text*`` query_string clause
        and every filter is appended to the same ``bool.must`` list.
        """
        must: list[dict[str, Any]] = [{"query_string": {"query": f"*{query.query}*"}}]
        must.extend(self.filters(query))

        body: dict[str, Any] = {"query": {"bool": {"must": must}}}

        sort = self.sort(query)
        if sort:
            body["sort"] = sort
        if from_ is not None:
            body["from"] = from_
        if size is not None:
            body["size"] = size

        return {"index": query.index, "body": body}

    async def _perform_search(
        self,
        query: SearchQuery,
        from_: int | None = None,
        size: int | None = None,
    ) -> Any:
        params = self.build_search_params(query, from_=from_, size=size)

        if query.callback is not None:
            result = query.callback(self._client, query.query, params)
            if inspect.isawaitable(result):
                result = await result
            return result

        return _body(await self._client.search(**params))

    @staticmethod
    def filters(query: SearchQuery) -> list[dict[str, Any]]:
        """Translate ``query.wheres`` into must clauses, in insertion order.

        Collection values become ``terms`` clauses; anything else becomes
        a ``match_phrase`` clause.
        """
        clauses: list[dict[str, Any]] = []
        for field, value in query.wheres.items():
            if isinstance(value, (list, tuple, Set)):
                clauses.append({"terms": {field: list(value)}})
            else:
                clauses.append({"match_phrase": {field: value}})
        return clauses

    @staticmethod
    def sort(query: SearchQuery) -> list[dict[str, str]] | None:
        """Translate sort directives, or return ``None`` when there are none."""
        if not query.orders:
            return None
        return [{order.column: order.direction.value} for order in query.orders]

    # ── Result mapping ───────────────────────────────────────────────────

    def map_ids(self, results: Any) -> list[str]:
        return [hit["_id"] for hit in results["hits"]["hits"]]

    async def map(self, query: SearchQuery, results: Any, lookup: ModelLookup) -> list[Searchable]:
        """Resolve hits to records via ``lookup``, keeping engine order.

        Hits the lookup does not return are dropped rather than padded.
        """
        if self.get_total_count(results) == 0:
            return []

        ids = self.map_ids(results)
        found = await lookup.get_models_by_ids(query, ids)
        models = {str(model.get_search_key()): model for model in found}

        return [models[doc_id] for doc_id in ids if doc_id in models]

    def get_total_count(self, results: Any) -> int:
        total = results["hits"]["total"]
        # Elasticsearch 7+ reports {"value": n, "relation": "eq"}
        if isinstance(total, Mapping):
            return int(total["value"])
        return int(total)

    # ── Unsupported ──────────────────────────────────────────────────────

    async def lazy_map(self, query: SearchQuery, results: Any, lookup: ModelLookup) -> Any:
        raise UnsupportedOperation("ElasticsearchEngine does not support lazy_map().")

    async def create_index(self, name: str, options: dict[str, Any] | None = None) -> Any:
        raise UnsupportedOperation("ElasticsearchEngine does not support create_index().")

    async def delete_index(self, name: str) -> Any:
        raise UnsupportedOperation("ElasticsearchEngine does not support delete_index().")


def _body(response: Any) -> Any:
    """Unwrap an ``ObjectApiResponse`` to its plain body."""
    return getattr(response, "body", response)
