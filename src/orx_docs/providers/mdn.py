"""MDN Web Docs provider."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from orx_docs.base import ExampleBlock, PageDescriptor, SearchQuery
from orx_docs.config import Settings
from orx_docs.errors import ConfigurationError, DecodeError, NoResultsError
from orx_docs.extractor import ExampleExtractor
from orx_docs.http_client import SearchClient
from orx_docs.registry import register

logger = logging.getLogger(__name__)


@register
class MdnProvider:
    """Search via the MDN site search API, examples scraped from the page."""

    name = "mdn"
    search_path = "/api/v1/search?q={query}&locale={locale}"

    def __init__(
        self,
        settings: Settings | None = None,
        extractor: ExampleExtractor | None = None,
    ) -> None:
        settings = settings or Settings()
        self._base_url = settings.mdn_base_url.rstrip("/")
        self._locale = settings.mdn_locale
        self._extractor = extractor or ExampleExtractor()
        self._search_template = self._base_url + self.search_path
        try:
            # Probe the template once so bad configuration fails at startup.
            self._search_template.format(query="probe", locale=self._locale)
        except (KeyError, IndexError, ValueError) as exc:
            raise ConfigurationError(
                f"Invalid MDN search URL template: {self._search_template}"
            ) from exc
        if not self._base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid MDN base URL: {self._base_url!r}")

    def build_search_url(self, query: SearchQuery) -> str:
        return self._search_template.format(
            query=quote(query.raw_text, safe=""),
            locale=quote(self._locale, safe=""),
        )

    def parse_search_response(self, payload: Any) -> PageDescriptor:
        documents = payload.get("documents") if isinstance(payload, dict) else None
        if not isinstance(documents, list):
            raise DecodeError("MDN search response has no document list.")
        if not documents:
            raise NoResultsError("No results were found.")

        # First candidate wins; MDN already orders by relevance.
        page = documents[0]
        if not isinstance(page, dict):
            raise DecodeError("MDN search response has a malformed document.")
        title = page.get("title")
        mdn_url = page.get("mdn_url")
        if not isinstance(title, str) or not isinstance(mdn_url, str) or not mdn_url:
            raise DecodeError("MDN search result is missing its title or URL.")
        summary = page.get("summary")

        return PageDescriptor(
            title=title,
            summary=summary if isinstance(summary, str) else "",
            url=f"{self._base_url}{mdn_url}",
        )

    async def extract_example(
        self, page_url: str, client: SearchClient
    ) -> ExampleBlock | None:
        document = await client.fetch_html(page_url)
        return await self._extractor.extract(document, load_embed=client.fetch_html)
