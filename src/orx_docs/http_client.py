"""Async HTTP client for provider search endpoints and documentation pages."""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any

import httpx
from lxml import etree, html

from .config import Settings
from .errors import DecodeError, HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


class SearchClient:
    """Performs GET requests and decodes JSON or HTML bodies.

    Every failure is mapped to a typed error and nothing is retried. An
    injected ``httpx.AsyncClient`` stays owned by the caller and is not closed.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        http2: bool = True,
    ) -> None:
        self._settings = settings or Settings()
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            headers={"User-Agent": self._settings.user_agent},
            timeout=self._settings.timeout_seconds,
            follow_redirects=True,
            http2=http2,
        )

    async def __aenter__(self) -> SearchClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_val: BaseException | None = None,
        exc_tb: TracebackType | None = None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def fetch_json(self, url: str) -> Any:
        resp = await self._get(url)
        try:
            return json.loads(resp.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Invalid JSON returned by {url}") from exc

    async def fetch_html(self, url: str) -> html.HtmlElement:
        resp = await self._get(url)
        if not resp.content.strip():
            raise DecodeError(f"Empty HTML document returned by {url}")
        try:
            # Decode by the HTTP charset; libxml2 assumes Latin-1 without a meta tag.
            parser = html.HTMLParser(encoding=resp.encoding or "utf-8")
            return html.document_fromstring(
                resp.content, parser=parser, base_url=str(resp.url)
            )
        except (etree.ParserError, LookupError, ValueError) as exc:
            raise DecodeError(f"Invalid HTML returned by {url}") from exc

    async def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            resp = await self.client.get(url)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Request to {url} timed out.") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"Request to {url} failed: {exc}") from exc

        if not resp.is_success:
            raise HttpStatusError(
                f"HTTP error {resp.status_code} for {url}",
                status_code=resp.status_code,
                url=url,
            )
        return resp
