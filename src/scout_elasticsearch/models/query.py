"""Query descriptor models."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SortDirection(StrEnum):
    """Sort direction understood by the search backend."""

    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    """A single sort directive."""

    column: str = Field(description="Field to sort on")
    direction: SortDirection = Field(default=SortDirection.ASC, description="Sort direction")


class SearchQuery(BaseModel):
    """The caller's search intent, before translation into engine syntax.

    Built fluently by the host application::

        query = (
            SearchQuery(index="articles", query="solar")
            .where("status", "published")
            .where_in("tags", ["energy", "climate"])
            .order_by("published_at", "desc")
            .take(20)
        )
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: str = Field(description="Index the query runs against")
    query: str = Field(default="", description="Free-text query")
    wheres: dict[str, Any] = Field(
        default_factory=dict,
        description="Equality filters; a list/tuple/set value means 'value in set'",
    )
    orders: list[SortOrder] = Field(default_factory=list, description="Sort directives, in priority order")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of hits")
    callback: Callable[..., Any] | None = Field(
        default=None,
        description="Custom handler called as callback(client, query, params) instead of the default search",
    )

    def where(self, field: str, value: Any) -> SearchQuery:
        """Add an exact-match filter."""
        self.wheres[field] = value
        return self

    def where_in(self, field: str, values: list[Any] | tuple[Any, ...] | set[Any]) -> SearchQuery:
        """Add a 'value in set' filter."""
        self.wheres[field] = list(values)
        return self

    def order_by(self, column: str, direction: str | SortDirection = SortDirection.ASC) -> SearchQuery:
        """Append a sort directive."""
        self.orders.append(SortOrder(column=column, direction=SortDirection(str(direction).lower())))
        return self

    def take(self, limit: int) -> SearchQuery:
        """Cap the number of hits returned."""
        self.limit = limit
        return self
