from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from summariser_cli.config import SummariserConfig
from summariser_cli.db import DB
from summariser_cli.server.main import create_app
from summariser_cli.service import SummariseService

from fakes import FailingTranslator, FakeTranslator


@pytest.fixture()
def client(config: SummariserConfig, store: DB) -> TestClient:
    service = SummariseService(config, translator=FakeTranslator(), store=store)
    return TestClient(create_app(service))


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_summarise_text(client: TestClient, article: str) -> None:
    response = client.post("/summarise", json={"text": article})
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"summary", "translatedSummary", "originalLength", "summaryLength"}
    assert body["summary"].startswith("Solar panels convert sunlight into electricity for homes.")
    assert body["translatedSummary"] == "ترجمہ شدہ خلاصہ"
    assert body["originalLength"] == len(article)
    assert body["summaryLength"] == len(body["summary"])


def test_summary_is_stored_and_listed(client: TestClient, article: str) -> None:
    client.post("/summarise", json={"text": article, "translate": False})
    rows = client.get("/summaries").json()
    assert len(rows) == 1
    assert rows[0]["translated_summary"] is None
    assert rows[0]["original_length"] == len(article)
    assert client.get("/stats").json() == {"sources": 1, "summaries": 1, "translated": 0}


def test_short_text_is_bad_request(client: TestClient) -> None:
    response = client.post("/summarise", json={"text": "x" * 99})
    assert response.status_code == 400
    assert "at least 100 characters" in response.json()["error"]
    assert client.get("/stats").json()["summaries"] == 0


def test_invalid_body_is_bad_request(client: TestClient) -> None:
    response = client.post("/summarise", json={"text": ["not", "a", "string"]})
    assert response.status_code == 400
    assert "error" in response.json()


def test_scraped_url_too_short(config: SummariserConfig) -> None:
    async def fetcher(url: str) -> str:
        return "tiny"

    client = TestClient(create_app(SummariseService(config, fetcher=fetcher)))
    response = client.post("/summarise", json={"url": "https://blog.example.com/a"})
    assert response.status_code == 400
    assert response.json() == {"error": "Could not extract enough content from the provided URL."}


@pytest.mark.parametrize("status_code", [502, 500])
def test_translation_failure_status(config: SummariserConfig, article: str, status_code: int) -> None:
    service = SummariseService(config, translator=FailingTranslator(status_code))
    response = TestClient(create_app(service)).post("/summarise", json={"text": article})
    assert response.status_code == status_code
    assert response.json() == {"error": "Translation failed or returned invalid result."}


def test_unexpected_error_is_500(config: SummariserConfig) -> None:
    async def fetcher(url: str) -> str:
        raise RuntimeError("boom")

    client = TestClient(create_app(SummariseService(config, fetcher=fetcher)))
    response = client.post("/summarise", json={"url": "https://blog.example.com/a"})
    assert response.status_code == 500
    assert response.json() == {"error": "boom"}


def test_listing_without_store(config: SummariserConfig) -> None:
    client = TestClient(create_app(SummariseService(config)))
    assert client.get("/summaries").json() == []
    assert client.get("/stats").json() == {}
