from __future__ import annotations


class SummariserError(Exception):
    """Base for failures surfaced to callers. ``status_code`` is the HTTP mapping."""

    status_code = 500


class SummarizationError(SummariserError):
    """The core could not produce a summary (empty document)."""


class InputTooShortError(SummariserError):
    status_code = 400


class ScrapeError(SummariserError):
    status_code = 400


class EmptySummaryError(SummariserError):
    """Summary fell below the minimum length; the source is degenerate."""


class TranslationError(SummariserError):
    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code
