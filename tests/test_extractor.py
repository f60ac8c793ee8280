from __future__ import annotations

import pytest
from lxml import html

from orx_docs.base import ExampleBlock
from orx_docs.errors import NetworkError
from orx_docs.extractor import ExampleExtractor

PAGE_URL = "https://developer.mozilla.org/en-US/docs/Web/CSS/color"


def _doc(markup: str, url: str = PAGE_URL) -> html.HtmlElement:
    return html.document_fromstring(markup, base_url=url)


def _loader(documents: dict[str, str], calls: list[str] | None = None):
    async def load(url: str) -> html.HtmlElement:
        if calls is not None:
            calls.append(url)
        if url not in documents:
            raise NetworkError(f"Request to {url} failed")
        return _doc(documents[url], url)

    return load


EMBED_URL = "https://interactive-examples.mdn.mozilla.net/pages/css/color.html"

PAGE_WITH_EMBED = f"""
<html><body>
<h1>color</h1>
<iframe class="interactive is-tabbed-shorter-height" src="{EMBED_URL}"></iframe>
<pre class="brush: css notranslate">color: red;</pre>
</body></html>
"""

PAGE_WITH_STATIC = """
<html><body>
<p>Intro</p>
<pre class="brush: js notranslate">const total = [1, 2].map((x) =&gt; x * 2);</pre>
<pre class="brush: html">&lt;p&gt;second&lt;/p&gt;</pre>
</body></html>
"""


@pytest.mark.anyio
async def test_embed_language_from_code_class() -> None:
    embed = '<html><body><code class="css-example">p { color: red; }</code></body></html>'
    calls: list[str] = []

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({EMBED_URL: embed}, calls)
    )

    assert example == ExampleBlock(language="css", code="p { color: red; }")
    assert calls == [EMBED_URL]


@pytest.mark.anyio
async def test_embed_language_from_code_id() -> None:
    embed = '<html><body><code id="static-js">let a = 1;</code></body></html>'

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({EMBED_URL: embed})
    )

    assert example == ExampleBlock(language="js", code="let a = 1;")


@pytest.mark.anyio
async def test_tabbed_embed_uses_first_tab_id_literally() -> None:
    embed = """
    <html><body>
    <div role="tablist">
      <button role="tab" id="html">HTML</button>
      <button role="tab" id="css">CSS</button>
    </div>
    <code id="editor">&lt;h1&gt;Hi&lt;/h1&gt;</code>
    </body></html>
    """

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({EMBED_URL: embed})
    )

    assert example is not None
    assert example.language == "html"
    assert example.code == "<h1>Hi</h1>"


@pytest.mark.anyio
async def test_tab_id_is_not_restricted_to_known_languages() -> None:
    embed = """
    <html><body>
    <button role="tab" id="wat">WAT</button>
    <code>(module)</code>
    </body></html>
    """

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({EMBED_URL: embed})
    )

    assert example == ExampleBlock(language="wat", code="(module)")


@pytest.mark.anyio
async def test_embed_without_hint_or_tabs_is_unknown() -> None:
    embed = "<html><body><code>???</code></body></html>"

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({EMBED_URL: embed})
    )

    assert example == ExampleBlock(language="unknown", code="???")


@pytest.mark.anyio
async def test_embed_load_failure_falls_back_to_static_block() -> None:
    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({})
    )

    assert example == ExampleBlock(language="css", code="color: red;")


@pytest.mark.anyio
async def test_embed_without_code_falls_back_to_static_block() -> None:
    embed = "<html><body><p>Loading editor</p></body></html>"

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_EMBED), load_embed=_loader({EMBED_URL: embed})
    )

    assert example == ExampleBlock(language="css", code="color: red;")


@pytest.mark.anyio
async def test_static_block_uses_first_pre() -> None:
    calls: list[str] = []

    example = await ExampleExtractor().extract(
        _doc(PAGE_WITH_STATIC), load_embed=_loader({}, calls)
    )

    assert example == ExampleBlock(
        language="js", code="const total = [1, 2].map((x) => x * 2);"
    )
    assert calls == []


@pytest.mark.anyio
async def test_static_block_with_unrecognized_class_keeps_text() -> None:
    page = '<html><body><pre class="brush: python">print("hi")</pre></body></html>'

    example = await ExampleExtractor().extract(_doc(page), load_embed=_loader({}))

    assert example == ExampleBlock(language="unknown", code='print("hi")')


@pytest.mark.anyio
async def test_no_example_on_page() -> None:
    page = "<html><body><p>Just prose.</p><code>inline</code></body></html>"

    example = await ExampleExtractor().extract(_doc(page), load_embed=_loader({}))

    assert example is None


def test_static_block_text_is_not_trimmed() -> None:
    page = '<html><body><pre class="css">a {\n  color: red;\n}\n</pre></body></html>'

    example = ExampleExtractor().from_static_block(_doc(page))

    assert example is not None
    assert example.code == "a {\n  color: red;\n}\n"


def test_static_block_text_includes_nested_markup() -> None:
    page = (
        '<html><body><pre class="brush: js"><span class="token">const</span> x '
        "= <b>1</b>;</pre></body></html>"
    )

    example = ExampleExtractor().from_static_block(_doc(page))

    assert example == ExampleBlock(language="js", code="const x = 1;")


def test_find_embed_url_resolves_relative_src() -> None:
    page = (
        '<html><body><iframe class="interactive" '
        'src="/examples/color.html"></iframe></body></html>'
    )

    url = ExampleExtractor().find_embed_url(_doc(page))

    assert url == "https://developer.mozilla.org/examples/color.html"


def test_find_embed_url_requires_interactive_class_token() -> None:
    page = (
        '<html><body><iframe class="noninteractive" src="https://x.example/a">'
        '</iframe><iframe src="https://x.example/b"></iframe></body></html>'
    )

    assert ExampleExtractor().find_embed_url(_doc(page)) is None


def test_find_embed_url_ignores_empty_src() -> None:
    page = '<html><body><iframe class="interactive"></iframe></body></html>'

    assert ExampleExtractor().find_embed_url(_doc(page)) is None


@pytest.mark.anyio
async def test_malformed_embed_src_falls_back_to_static_block() -> None:
    page = (
        '<html><body><iframe class="interactive" src="http://[broken/x"></iframe>'
        '<pre class="css">a</pre></body></html>'
    )
    calls: list[str] = []

    example = await ExampleExtractor().extract(
        _doc(page), load_embed=_loader({}, calls)
    )

    assert example == ExampleBlock(language="css", code="a")
    assert calls == []


def test_find_embed_url_malformed_src_is_none() -> None:
    page = (
        '<html><body><iframe class="interactive" src="http://[broken/x">'
        "</iframe></body></html>"
    )

    assert ExampleExtractor().find_embed_url(_doc(page)) is None
