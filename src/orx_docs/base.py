from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from orx_docs.http_client import SearchClient

Language = Literal["html", "css", "js", "unknown"]

KNOWN_LANGUAGES: tuple[Language, ...] = ("html", "css", "js")
UNKNOWN_LANGUAGE: Language = "unknown"


@dataclass(frozen=True)
class SearchQuery:
    provider_id: str
    raw_text: str


@dataclass(frozen=True)
class PageDescriptor:
    title: str
    summary: str
    url: str


@dataclass(frozen=True)
class ExampleBlock:
    # Tabbed live editors report the first tab id verbatim, so this is
    # not always one of the Language literals.
    language: str
    code: str


@dataclass(frozen=True)
class DocResult:
    provider_id: str
    page: PageDescriptor
    example: ExampleBlock | None = None


@runtime_checkable
class ProviderAdapter(Protocol):
    name: str

    def build_search_url(self, query: SearchQuery) -> str: ...

    def parse_search_response(self, payload: Any) -> PageDescriptor: ...

    async def extract_example(
        self, page_url: str, client: SearchClient
    ) -> ExampleBlock | None: ...
