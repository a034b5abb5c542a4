"""Request boundary around the summariser: input policy, scraping, translation, storage."""

from __future__ import annotations
import asyncio
import sqlite3
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol
from loguru import logger
from .config import SummariserConfig
from .db import DB
from .errors import EmptySummaryError, InputTooShortError
from .fetcher import fetch_article_text
from .summarizer import Summarizer

Fetcher = Callable[[str], Awaitable[str]]


class Translator(Protocol):
    async def translate(self, text: str) -> str:
        """Return ``text`` translated into the target language."""


@dataclass
class SummaryResult:
    summary: str
    original_length: int
    translated_summary: Optional[str] = None
    source_url: Optional[str] = None

    @property
    def summary_length(self) -> int:
        return len(self.summary)


class SummariseService:
    def __init__(
        self,
        config: SummariserConfig,
        translator: Optional[Translator] = None,
        store: Optional[DB] = None,
        fetcher: Optional[Fetcher] = None,
        summarizer: Optional[Summarizer] = None,
    ):
        self.config = config
        self.translator = translator
        self.store = store
        self.fetcher = fetcher or (lambda url: fetch_article_text(url, config))
        self.summarizer = summarizer or config.build_summarizer()

    def summarise_text(self, text: str) -> str:
        """Apply the length thresholds around one core call."""
        if len(text) < self.config.min_input_chars:
            raise InputTooShortError(
                f"Text must be at least {self.config.min_input_chars} characters, got {len(text)}."
            )
        summary = self.summarizer.summarize(text, self.config.top_n)
        if len(summary.strip()) < self.config.min_summary_chars:
            raise EmptySummaryError("Could not generate summary")
        return summary

    async def summarise(
        self,
        text: Optional[str] = None,
        url: Optional[str] = None,
        translate: bool = True,
    ) -> SummaryResult:
        text = (text or "").strip()
        url = (url or "").strip() or None
        if len(text) >= self.config.min_input_chars:
            url = None
        elif url:
            text = await self.fetcher(url)
            if not text or len(text) < self.config.min_input_chars:
                raise InputTooShortError("Could not extract enough content from the provided URL.")
        else:
            raise InputTooShortError(
                f"Please provide sufficient article text (at least {self.config.min_input_chars} "
                "characters) or a valid URL."
            )

        summary = await asyncio.to_thread(self.summarise_text, text)
        logger.info("Summarised {} characters into {}", len(text), len(summary))
        result = SummaryResult(summary=summary, original_length=len(text), source_url=url)

        if translate and self.translator is not None:
            result.translated_summary = await self.translator.translate(summary)

        if self.store is not None:
            self._persist(text, result)
        return result

    def _persist(self, text: str, result: SummaryResult) -> None:
        try:
            source_id = self.store.insert_source(text, url=result.source_url)
            self.store.insert_summary(
                result.summary,
                original_length=result.original_length,
                source_id=source_id,
                url=result.source_url,
                translated_summary=result.translated_summary,
            )
        except sqlite3.Error as ex:
            logger.warning("Could not save summary: {}", ex)
