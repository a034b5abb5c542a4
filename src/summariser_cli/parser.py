from __future__ import annotations
from typing import List
from bs4 import BeautifulSoup
from bs4.builder import builder_registry


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml") if builder_registry.lookup("lxml") else BeautifulSoup(html, "html.parser")


def extract_paragraphs(html: str, min_chars: int = 40) -> List[str]:
    """Text of every <p> whose trimmed length is over ``min_chars``."""
    soup = _soup(html)
    out = []
    for p in soup.find_all("p"):
        text = p.get_text()
        if len(text.strip()) > min_chars:
            out.append(text)
    return out


def extract_paragraph_text(html: str, min_chars: int = 40) -> str:
    return " ".join(extract_paragraphs(html, min_chars))
