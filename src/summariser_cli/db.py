from __future__ import annotations
import sqlite3
from pathlib import Path
from typing import Dict, List, Optional
from .utils import domain_of, hash_text, now_iso

SCHEMA = """
PRAGMA journal_mode = WAL;
CREATE TABLE IF NOT EXISTS sources (
  id INTEGER PRIMARY KEY,
  url TEXT,
  domain TEXT,
  content_hash TEXT,
  text TEXT,
  created_at TEXT
);
CREATE TABLE IF NOT EXISTS summaries (
  id INTEGER PRIMARY KEY,
  source_id INTEGER,
  url TEXT,
  summary TEXT,
  translated_summary TEXT,
  original_length INTEGER,
  summary_length INTEGER,
  created_at TEXT
);
"""


class DB:
    def __init__(self, path: Path):
        self.path = path
        # FastAPI runs sync handlers in a threadpool
        self.conn = sqlite3.connect(path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.executescript(SCHEMA)
        self.conn.commit()

    def close(self):
        self.conn.close()

    def insert_source(self, text: str, url: Optional[str] = None) -> int:
        cur = self.conn.cursor()
        cur.execute(
            """INSERT INTO sources(url, domain, content_hash, text, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            (url, domain_of(url) if url else None, hash_text(text), text, now_iso()),
        )
        self.conn.commit()
        return cur.lastrowid

    def insert_summary(
        self,
        summary: str,
        original_length: int,
        source_id: Optional[int] = None,
        url: Optional[str] = None,
        translated_summary: Optional[str] = None,
    ) -> int:
        cur = self.conn.cursor()
        cur.execute(
            """INSERT INTO summaries(source_id, url, summary, translated_summary,
               original_length, summary_length, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (source_id, url, summary, translated_summary, original_length, len(summary), now_iso()),
        )
        self.conn.commit()
        return cur.lastrowid

    def get_summary(self, summary_id: int) -> Optional[sqlite3.Row]:
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM summaries WHERE id = ?", (summary_id,))
        return cur.fetchone()

    def recent_summaries(self, limit: int = 20) -> List[sqlite3.Row]:
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM summaries ORDER BY id DESC LIMIT ?", (limit,))
        return cur.fetchall()

    def stats(self) -> Dict[str, int]:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) AS c FROM sources")
        sources = cur.fetchone()["c"]
        cur.execute("SELECT COUNT(*) AS c FROM summaries")
        sums = cur.fetchone()["c"]
        cur.execute("SELECT COUNT(*) AS c FROM summaries WHERE translated_summary IS NOT NULL")
        translated = cur.fetchone()["c"]
        return {"sources": sources, "summaries": sums, "translated": translated}
