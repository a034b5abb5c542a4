from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
from pathlib import Path
from .stopwords import build_stopwords
from .summarizer import DEFAULT_TERMINATORS, DEFAULT_TOP_N, Summarizer

DEFAULT_TRANSLATION_URL = "https://NOOBBoy69-English_Urdu_translation.hf.space/run/predict"


@dataclass
class SummariserConfig:
    name: str = "summariser"
    user_agent: str = "SummariserCLI/0.1"
    headers: Dict[str, str] = field(default_factory=dict)
    request_timeout: float = 20.0
    min_input_chars: int = 100
    min_summary_chars: int = 50
    min_paragraph_chars: int = 40
    top_n: int = DEFAULT_TOP_N
    terminators: str = DEFAULT_TERMINATORS
    extra_stopwords: List[str] = field(default_factory=list)
    translate: bool = True
    translation_url: Optional[str] = DEFAULT_TRANSLATION_URL
    translation_timeout: float = 30.0
    db_path: str = "summariser.db"

    def __post_init__(self):
        for key in ("min_input_chars", "min_summary_chars", "min_paragraph_chars", "top_n"):
            value = getattr(self, key)
            if value < 1:
                raise ValueError(f"{key} must be a positive integer, got {value}")
        if not self.terminators:
            raise ValueError("terminators must not be empty")

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummariserConfig":
        # Simple dict→dataclass conversion
        return SummariserConfig(
            name=data.get("name", "summariser"),
            user_agent=data.get("user_agent", "SummariserCLI/0.1"),
            headers=dict(data.get("headers", {}) or {}),
            request_timeout=float(data.get("request_timeout", 20.0)),
            min_input_chars=int(data.get("min_input_chars", 100)),
            min_summary_chars=int(data.get("min_summary_chars", 50)),
            min_paragraph_chars=int(data.get("min_paragraph_chars", 40)),
            top_n=int(data.get("top_n", DEFAULT_TOP_N)),
            terminators=data.get("terminators", DEFAULT_TERMINATORS),
            extra_stopwords=list(data.get("extra_stopwords", []) or []),
            translate=bool(data.get("translate", True)),
            translation_url=data.get("translation_url", DEFAULT_TRANSLATION_URL),
            translation_timeout=float(data.get("translation_timeout", 30.0)),
            db_path=data.get("db_path", "summariser.db"),
        )

    @staticmethod
    def load(path: Path) -> "SummariserConfig":
        return SummariserConfig.from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_json_str(s: str) -> "SummariserConfig":
        return SummariserConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        data = {
            "name": self.name,
            "user_agent": self.user_agent,
            "headers": self.headers,
            "request_timeout": self.request_timeout,
            "min_input_chars": self.min_input_chars,
            "min_summary_chars": self.min_summary_chars,
            "min_paragraph_chars": self.min_paragraph_chars,
            "top_n": self.top_n,
            "terminators": self.terminators,
            "extra_stopwords": self.extra_stopwords,
            "translate": self.translate,
            "translation_url": self.translation_url,
            "translation_timeout": self.translation_timeout,
            "db_path": self.db_path,
        }
        return json.dumps(data, indent=2)

    def build_summarizer(self) -> Summarizer:
        return Summarizer(stopwords=build_stopwords(self.extra_stopwords), terminators=self.terminators)


def write_default_config(path: Path, db_path: Optional[Path] = None) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    cfg = SummariserConfig()
    if db_path is not None:
        cfg.db_path = str(db_path)
    path.write_text(cfg.dump())
