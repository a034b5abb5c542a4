from __future__ import annotations
from typing import Optional
import httpx
from loguru import logger
from .errors import TranslationError


class HFSpaceTranslator:
    """
    Client for a Gradio-style Hugging Face Space ``run/predict`` endpoint.

    The Space receives ``{"data": [text]}`` and answers ``{"data": [translation]}``.
    """

    def __init__(self, url: str, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self.timeout = timeout
        self._client = client

    async def translate(self, text: str) -> str:
        if self._client is not None:
            return await self._post(self._client, text)
        async with httpx.AsyncClient() as client:
            return await self._post(client, text)

    async def _post(self, client: httpx.AsyncClient, text: str) -> str:
        try:
            r = await client.post(self.url, json={"data": [text]}, timeout=self.timeout)
            data = r.json()
        except (httpx.HTTPError, ValueError) as ex:
            logger.error("Translation request to {} failed: {}", self.url, ex)
            raise TranslationError(f"Failed to translate: {ex}", status_code=500) from ex

        result = None
        if isinstance(data, dict):
            items = data.get("data")
            if isinstance(items, list) and items:
                result = items[0]
        if not r.is_success or not isinstance(result, str) or not result:
            logger.error("Translation service returned {}: {}", r.status_code, data)
            raise TranslationError("Translation failed or returned invalid result.", status_code=502)
        return result
