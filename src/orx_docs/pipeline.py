from __future__ import annotations

import logging

import httpx

from .base import DocResult, SearchQuery
from .config import Settings
from .errors import InvalidQueryError, UnknownProviderError
from .http_client import SearchClient
from .registry import ProviderRegistry, default_registry

logger = logging.getLogger(__name__)


class DocSearch:
    """Search a documentation provider and extract the page's code example.

    The registry is the only state shared between calls. Each ``search``
    opens its own ``SearchClient`` (or borrows the injected httpx client)
    and issues at most three sequential requests: search, page, embed.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        *,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._registry = registry
        self._settings = settings or Settings()
        self._http_client = http_client

    async def search(self, provider_id: str, raw_text: str) -> DocResult:
        adapter = self._registry.get(provider_id)
        if adapter is None:
            raise UnknownProviderError(provider_id, self._registry.ids())
        if not raw_text or not raw_text.strip():
            raise InvalidQueryError("No search query was given.")

        query = SearchQuery(provider_id=provider_id, raw_text=raw_text)
        search_url = adapter.build_search_url(query)

        async with SearchClient(
            settings=self._settings, http_client=self._http_client
        ) as client:
            payload = await client.fetch_json(search_url)
            page = adapter.parse_search_response(payload)
            logger.debug("provider=%s page=%s", provider_id, page.url)
            example = await adapter.extract_example(page.url, client)

        return DocResult(provider_id=provider_id, page=page, example=example)


async def doc_search(provider_id: str, raw_text: str) -> DocResult:
    """Run one search with providers and settings taken from the environment."""
    settings = Settings.from_env()
    return await DocSearch(default_registry(settings), settings=settings).search(
        provider_id, raw_text
    )
