"""URI composition — scheme segments, authority, path, query, fragment."""

from wren.uri.base import UriView
from wren.uri.query import QueryItem, QueryParams, parse_query
from wren.uri.uri import EMPTY_URI, Uri, UriBuilder

__all__ = [
    "EMPTY_URI",
    "QueryItem",
    "QueryParams",
    "Uri",
    "UriBuilder",
    "UriView",
    "parse_query",
]
