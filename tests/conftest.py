"""Shared fixtures for the summariser tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

from summariser_cli.config import SummariserConfig
from summariser_cli.db import DB

ARTICLE = (
    "Solar panels convert sunlight into electricity for homes. "
    "Many homes now install solar panels on their roofs. "
    "Electricity prices fall when solar generation rises. "
    "Wind turbines also add clean electricity to the grid. "
    "Batteries store solar electricity for the evening."
)


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture()
def article() -> str:
    return ARTICLE


@pytest.fixture()
def config() -> SummariserConfig:
    return SummariserConfig(translation_url=None)


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[DB]:
    db = DB(tmp_path / "summariser.db")
    yield db
    db.close()
