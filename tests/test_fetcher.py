from __future__ import annotations

import asyncio

import httpx
import pytest

from summariser_cli.config import SummariserConfig
from summariser_cli.errors import ScrapeError
from summariser_cli.fetcher import fetch_article_text
from summariser_cli.parser import extract_paragraph_text

LONG_1 = "This paragraph is long enough to be kept by the extractor."
LONG_2 = "  Another paragraph that is definitely longer than forty chars.  "

PAGE = f"""
<html><body>
  <h1>Headline</h1>
  <p>short</p>
  <p>{LONG_1}</p>
  <div><p>{LONG_2}</p></div>
</body></html>
"""


def test_extract_paragraph_text_filters_short_paragraphs() -> None:
    assert extract_paragraph_text(PAGE) == f"{LONG_1} {LONG_2}"


def test_paragraph_threshold_is_exclusive() -> None:
    html = f"<p>{'x' * 40}</p><p>{'y' * 41}</p>"
    assert extract_paragraph_text(html, 40) == "y" * 41


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def _fetch(handler, url: str = "https://blog.example.com/post") -> str:
    async with _client(handler) as client:
        return await fetch_article_text(url, SummariserConfig(), client)


def test_fetch_article_text_sends_user_agent() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, html=PAGE)

    assert asyncio.run(_fetch(handler)) == f"{LONG_1} {LONG_2}"
    assert seen["ua"] == "SummariserCLI/0.1"


def test_fetch_article_text_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="missing")

    with pytest.raises(ScrapeError, match="HTTP 404"):
        asyncio.run(_fetch(handler))


def test_fetch_article_text_raises_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ScrapeError):
        asyncio.run(_fetch(handler))


def test_fetch_article_text_rejects_non_html() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"not": "html"})

    with pytest.raises(ScrapeError, match="content type"):
        asyncio.run(_fetch(handler))
