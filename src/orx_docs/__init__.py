from orx_docs.base import DocResult, ExampleBlock, PageDescriptor, SearchQuery
from orx_docs.errors import (
    DecodeError,
    DocSearchError,
    HttpStatusError,
    InvalidQueryError,
    NetworkError,
    NoResultsError,
    UnknownProviderError,
)
from orx_docs.pipeline import DocSearch, doc_search

__all__ = [
    "DecodeError",
    "DocResult",
    "DocSearch",
    "DocSearchError",
    "ExampleBlock",
    "HttpStatusError",
    "InvalidQueryError",
    "NetworkError",
    "NoResultsError",
    "PageDescriptor",
    "SearchQuery",
    "UnknownProviderError",
    "doc_search",
]
