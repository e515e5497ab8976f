"""Value objects shared between the host abstraction and the engines."""

from scout_elasticsearch.models.query import SearchQuery, SortDirection, SortOrder
from scout_elasticsearch.models.searchable import ModelLookup, Searchable

__all__ = ["ModelLookup", "SearchQuery", "Searchable", "SortDirection", "SortOrder"]
