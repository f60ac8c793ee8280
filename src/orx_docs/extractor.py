"""Locate and classify the representative code example of a documentation page.

Pages either embed an interactive live editor through an ``iframe`` (its
content lives in a second document that has to be fetched) or carry static
``<pre>`` blocks directly in their markup. The live editor wins when both
are present. Language detection is a substring match of ``id``/``class``
attributes against a closed set, so the heuristics are kept here and tested
against fixed HTML fixtures.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from urllib.parse import urljoin

from lxml import html

from .base import KNOWN_LANGUAGES, UNKNOWN_LANGUAGE, ExampleBlock
from .errors import DocSearchError

logger = logging.getLogger(__name__)

EmbedLoader = Callable[[str], Awaitable[html.HtmlElement]]

_EMBED_XPATH = (
    "//iframe[contains(concat(' ', normalize-space(@class), ' '), ' interactive ')]"
)
_EMBED_CODE_XPATH = "//code"
_EMBED_TAB_XPATH = "//button[@role='tab']"
_STATIC_BLOCK_XPATH = "//pre"


class ExampleExtractor:
    async def extract(
        self, document: html.HtmlElement, *, load_embed: EmbedLoader
    ) -> ExampleBlock | None:
        embed_url = self.find_embed_url(document)
        if embed_url:
            try:
                embed_document = await load_embed(embed_url)
            except DocSearchError as exc:
                logger.warning(
                    "Live editor %s could not be loaded, using static block: %s",
                    embed_url,
                    exc.user_message,
                )
            else:
                example = self.from_embed(embed_document)
                if example is not None:
                    return example
                logger.warning(
                    "Live editor %s has no code, using static block", embed_url
                )

        return self.from_static_block(document)

    def find_embed_url(self, document: html.HtmlElement) -> str | None:
        """Absolute URL of the first interactive editor frame, if any."""
        frames = document.xpath(_EMBED_XPATH)
        if not frames:
            return None
        src = (frames[0].get("src") or "").strip()
        if not src:
            return None
        try:
            return urljoin(frames[0].base_url or "", src)
        except ValueError:
            logger.warning("Live editor src %r is not a valid URL, ignoring", src)
            return None

    def from_embed(self, embed_document: html.HtmlElement) -> ExampleBlock | None:
        codes = embed_document.xpath(_EMBED_CODE_XPATH)
        if not codes:
            return None
        code_element = codes[0]

        language = _match_language(code_element.get("id"), code_element.get("class"))
        if language is None:
            # Tabbed editors carry no hint on the code element; the first
            # tab is named after its language.
            tabs = embed_document.xpath(_EMBED_TAB_XPATH)
            tab_id = tabs[0].get("id") if tabs else None
            language = tab_id or UNKNOWN_LANGUAGE

        return _block(language, code_element)

    def from_static_block(self, document: html.HtmlElement) -> ExampleBlock | None:
        blocks = document.xpath(_STATIC_BLOCK_XPATH)
        if not blocks:
            return None
        block = blocks[0]
        language = _match_language(block.get("class")) or UNKNOWN_LANGUAGE
        return _block(language, block)


def _match_language(*attributes: str | None) -> str | None:
    for language in KNOWN_LANGUAGES:
        if any(attr and language in attr for attr in attributes):
            return language
    return None


def _block(language: str, element: html.HtmlElement) -> ExampleBlock | None:
    code = str(element.text_content())
    if not code:
        return None
    return ExampleBlock(language=language, code=code)
