from __future__ import annotations
from datetime import datetime, timezone
from urllib.parse import urlparse
import hashlib


def domain_of(url: str) -> str:
    return urlparse(url).netloc.lower()


def hash_text(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", "ignore")).hexdigest()


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
