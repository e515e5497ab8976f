"""Bulk request builder for the Elasticsearch ``_bulk`` API."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from scout_elasticsearch.models.searchable import Searchable


class Bulk:
    """Accumulates bulk actions for a batch of records.

    Index actions are a header line followed by the document; delete
    actions are a header line only.
    """

    def __init__(self) -> None:
        self._actions: list[tuple[dict[str, Any], dict[str, Any] | None]] = []

    def index(self, models: Iterable[Searchable]) -> Bulk:
        """Queue an index (create-or-replace) action per record."""
        for model in models:
            self._actions.append(({"index": self._header(model)}, model.to_searchable_dict()))
        return self

    def delete(self, models: Iterable[Searchable]) -> Bulk:
        """Queue a delete action per record."""
        for model in models:
            self._actions.append(({"delete": self._header(model)}, None))
        return self

    def to_operations(self) -> list[dict[str, Any]]:
        """Flatten the queued actions into bulk lines."""
        operations: list[dict[str, Any]] = []
        for header, document in self._actions:
            operations.append(header)
            if document is not None:
                operations.append(document)
        return operations

    def __len__(self) -> int:
        return len(self._actions)

    @staticmethod
    def _header(model: Searchable) -> dict[str, Any]:
        return {"_id": str(model.get_search_key()), "_index": model.searchable_as()}
