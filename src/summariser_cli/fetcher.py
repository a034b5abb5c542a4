from __future__ import annotations
from typing import Optional, Tuple
import httpx
from loguru import logger
from .config import SummariserConfig
from .errors import ScrapeError
from .parser import extract_paragraph_text
from .utils import domain_of


async def fetch_one(
    client: httpx.AsyncClient,
    cfg: SummariserConfig,
    url: str,
) -> Tuple[str, Optional[str], Optional[int], Optional[str]]:
    # Returns (url, html, status, error)
    headers = {"User-Agent": cfg.user_agent, **(cfg.headers or {})}
    try:
        r = await client.get(url, headers=headers, timeout=httpx.Timeout(10.0, read=cfg.request_timeout), follow_redirects=True)
    except httpx.HTTPError as ex:
        return (url, None, None, repr(ex))
    status = r.status_code
    if not 200 <= status < 300:
        return (str(r.url), None, status, f"HTTP {status}")
    # basic content-type check
    ct = r.headers.get("Content-Type", "")
    if "text/html" in ct or "application/xhtml+xml" in ct or ct == "":
        return (str(r.url), r.text, status, None)
    return (str(r.url), None, status, f"Unsupported content type: {ct}")


async def fetch_article_text(
    url: str,
    cfg: SummariserConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Fetch ``url`` and return its qualifying paragraph text joined by spaces."""
    if client is None:
        async with httpx.AsyncClient() as own:
            return await fetch_article_text(url, cfg, own)

    logger.info("Fetching {} ({})", url, domain_of(url))
    final_url, html, status, error = await fetch_one(client, cfg, url)
    if error is not None:
        logger.warning("Fetch failed for {}: {}", url, error)
        raise ScrapeError(f"Failed to scrape article: {error}")
    text = extract_paragraph_text(html or "", cfg.min_paragraph_chars)
    logger.debug("Extracted {} characters from {}", len(text), final_url)
    return text
