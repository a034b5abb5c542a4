from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional
from loguru import logger
from .errors import SummarizationError
from .stopwords import DEFAULT_STOPWORDS

DEFAULT_TERMINATORS = ".!?\n"
DEFAULT_TOP_N = 3


@dataclass(frozen=True)
class ScoredSentence:
    index: int
    text: str
    score: int


def segment(document: str, terminators: str = DEFAULT_TERMINATORS) -> List[str]:
    """
    Split a document into sentence-like units.

    A unit is a run of non-terminator characters followed by a run of
    terminators; the terminators stay with the unit. Leading terminators and
    unterminated trailing text are not units. Falls back to the whole
    document when nothing qualifies.
    """
    units: List[str] = []
    start: Optional[int] = None  # start of the current body run
    in_tail = False
    for i, ch in enumerate(document):
        if ch in terminators:
            if start is not None:
                in_tail = True
            continue
        if in_tail:
            units.append(document[start:i])
            start = i
            in_tail = False
        elif start is None:
            start = i
    if in_tail:
        units.append(document[start:])
    if not units:
        return [document]
    return units


class Tokenizer:
    """Lower-cases, deletes non-letters, splits on whitespace, drops stopwords."""

    def __init__(self, stopwords: Iterable[str] = DEFAULT_STOPWORDS):
        self.stopwords = frozenset(w.lower() for w in stopwords)

    def normalize(self, text: str) -> List[str]:
        # deletion, not replacement: "well-known" -> "wellknown"
        kept = "".join(ch for ch in text.lower() if ("a" <= ch <= "z") or ch.isspace())
        return [t for t in kept.split() if t and t not in self.stopwords]


def build_frequency_table(document: str, tokenizer: Tokenizer) -> Mapping[str, int]:
    """Count every non-stopword token over the whole document."""
    return MappingProxyType(Counter(tokenizer.normalize(document)))


def score_sentences(
    sentences: List[str], table: Mapping[str, int], tokenizer: Tokenizer
) -> List[ScoredSentence]:
    return [
        ScoredSentence(i, s, sum(table.get(tok, 0) for tok in tokenizer.normalize(s)))
        for i, s in enumerate(sentences)
    ]


def rank(
    sentences: List[str],
    table: Mapping[str, int],
    tokenizer: Tokenizer,
    top_n: int = DEFAULT_TOP_N,
) -> List[str]:
    """
    Return the trimmed text of the ``top_n`` best scoring sentences, best first.

    ``sorted`` is stable, so equal scores keep document order.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")
    scored = [s for s in score_sentences(sentences, table, tokenizer) if s.text.strip()]
    ordered = sorted(scored, key=lambda s: s.score, reverse=True)
    return [s.text.strip() for s in ordered[:top_n]]


class Summarizer:
    """Extractive single-document summariser driven by term frequency."""

    def __init__(
        self,
        stopwords: Iterable[str] = DEFAULT_STOPWORDS,
        terminators: str = DEFAULT_TERMINATORS,
    ):
        if not terminators:
            raise ValueError("terminators must not be empty")
        self.tokenizer = Tokenizer(stopwords)
        self.terminators = terminators

    def segment(self, document: str) -> List[str]:
        return segment(document, self.terminators)

    def normalize(self, text: str) -> List[str]:
        return self.tokenizer.normalize(text)

    def frequency_table(self, document: str) -> Mapping[str, int]:
        return build_frequency_table(document, self.tokenizer)

    def rank(self, sentences: List[str], table: Mapping[str, int], top_n: int = DEFAULT_TOP_N) -> List[str]:
        return rank(sentences, table, self.tokenizer, top_n)

    def score_sentences(self, document: str) -> List[ScoredSentence]:
        """Scores for every unit of ``document``, in document order."""
        return score_sentences(self.segment(document), self.frequency_table(document), self.tokenizer)

    def summarize(self, document: str, top_n: int = DEFAULT_TOP_N) -> str:
        if not document or not document.strip():
            raise SummarizationError("Cannot summarise an empty document")
        sentences = self.segment(document)
        if not sentences:
            raise SummarizationError("Document produced no sentences")
        table = self.frequency_table(document)
        selected = self.rank(sentences, table, top_n)
        logger.debug(
            "Selected {} of {} sentences ({} distinct terms)",
            len(selected), len(sentences), len(table),
        )
        return " ".join(selected)


_default: Optional[Summarizer] = None


def summarize_text(text: str, top_n: int = DEFAULT_TOP_N) -> str:
    """Summarise with the default stopword set and terminators."""
    global _default
    if _default is None:
        _default = Summarizer()
    return _default.summarize(text, top_n)
