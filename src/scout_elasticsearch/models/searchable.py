"""Protocols the host application's records and lookups must satisfy."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from scout_elasticsearch.models.query import SearchQuery


@runtime_checkable
class Searchable(Protocol):
    """A record that can be written to a search index.

    ``searchable_as`` is usually a classmethod so that both the record
    class and its instances can be passed where an index is needed.
    """

    def get_search_key(self) -> Any:
        """Primary key used as the document id."""
        ...

    def searchable_as(self) -> str:
        """Name of the index the record lives in."""
        ...

    def to_searchable_dict(self) -> dict[str, Any]:
        """Document body sent to the index."""
        ...


class ModelLookup(Protocol):
    """Resolves engine hit ids back to records."""

    async def get_models_by_ids(self, query: SearchQuery, ids: Sequence[str]) -> Sequence[Searchable]:
        """Return the records matching ``ids``; missing ids are simply absent."""
        ...
