"""Remote class search."""

from .central_search import CentralSearchClient, SearchResponse, SearchDoc

__all__ = ["CentralSearchClient", "SearchResponse", "SearchDoc"]
