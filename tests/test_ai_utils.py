import json

import pytest
import requests

import ai_utils
from models import GeneratedMovieData


class FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._body


def _gemini_body(data):
    return {"candidates": [{"content": {"parts": [{"text": json.dumps(data)}]}}]}


@pytest.fixture
def with_key(monkeypatch):
    monkeypatch.setattr(ai_utils, "GEMINI_API_KEY", "test-key")


def test_missing_key_returns_none(monkeypatch):
    monkeypatch.setattr(ai_utils, "GEMINI_API_KEY", "")

    def boom(*args, **kwargs):
        raise AssertionError("no HTTP call expected")

    monkeypatch.setattr(ai_utils.requests, "post", boom)
    assert ai_utils.generate_movie_details("Dune 2") is None


def test_generate_parses_structured_reply(with_key, monkeypatch):
    seen = {}

    def fake_post(url, json=None, headers=None, timeout=None):
        seen.update(url=url, json=json, headers=headers, timeout=timeout)
        return FakeResponse(
            _gemini_body(
                {
                    "year": 2024,
                    "category": "Hollywood",
                    "genres": ["Sci-Fi", "Adventure"],
                    "language": "English",
                    "description": "Paul unites with the Fremen.",
                    "qualityTag": "4K",
                    "seoTags": "dune 2 download, cinezuva",
                }
            )
        )

    monkeypatch.setattr(ai_utils.requests, "post", fake_post)
    data = ai_utils.generate_movie_details("Dune 2")

    assert isinstance(data, GeneratedMovieData)
    assert data.year == "2024"
    assert data.genres == ["Sci-Fi", "Adventure"]
    assert data.qualityTag == "4K"

    assert seen["url"].endswith(":generateContent")
    assert seen["headers"] == {"x-goog-api-key": "test-key"}
    assert seen["json"]["generationConfig"]["responseMimeType"] == "application/json"
    assert "Dune 2" in seen["json"]["contents"][0]["parts"][0]["text"]


def test_network_error_returns_none(with_key, monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(ai_utils.requests, "post", fake_post)
    assert ai_utils.generate_movie_details("Dune 2") is None


def test_http_error_returns_none(with_key, monkeypatch):
    monkeypatch.setattr(ai_utils.requests, "post", lambda *a, **k: FakeResponse({}, 500))
    assert ai_utils.generate_movie_details("Dune 2") is None


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": [{"text": "not json"}]}}]},
        _gemini_body({"genres": "Action"}),
    ],
)
def test_unexpected_reply_returns_none(with_key, monkeypatch, body):
    monkeypatch.setattr(ai_utils.requests, "post", lambda *a, **k: FakeResponse(body))
    assert ai_utils.generate_movie_details("Dune 2") is None


def test_prompt_lists_categories_and_brand():
    prompt = ai_utils.build_prompt("Pathaan")
    assert '"Bollywood"' in prompt
    assert "cinezuva movies" in prompt
    assert "Pathaan full movie" in prompt
