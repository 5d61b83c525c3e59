from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient
from pydantic import TypeAdapter

from app.api.schemas.v1.suggestions import OverlapSuggestionsResponse, SuggestionsResponse
from app.main import create_app


USER = {"X-User-Id": "user-1"}


@pytest.fixture
def analysis_client(settings_with_corpus) -> TestClient:
    app = create_app(settings=settings_with_corpus)
    with TestClient(app) as client:
        yield client


def test_analyze_returns_word_statuses_in_order(analysis_client: TestClient) -> None:
    response = analysis_client.post(
        "/api/analyze",
        json={"text": "Hoorraa hora ... xyz"},
        headers=USER,
    )

    assert response.status_code == 200
    words = response.json()["words"]
    assert [(item["word"], item["status"], item["position"]) for item in words] == [
        ("Hoorraa", "correct", 0),
        ("hora", "variant", 1),
        ("xyz", "unknown", 3),
    ]
    assert words[1]["base_word"] == "hora"
    assert words[1]["suggestions"] == ["Hoorraa"]
    assert words[2]["suggestions"] == []


def test_analyze_empty_text_returns_empty_list(analysis_client: TestClient) -> None:
    response = analysis_client.post("/api/analyze", json={"text": "   "}, headers=USER)

    assert response.status_code == 200
    assert response.json() == {"words": []}


def test_analyze_without_user_is_unauthorized(analysis_client: TestClient) -> None:
    missing = analysis_client.post("/api/analyze", json={"text": "Hoorraa"})
    blank = analysis_client.post("/api/analyze", json={"text": "Hoorraa"}, headers={"X-User-Id": " "})

    assert missing.status_code == 401
    assert missing.json()["detail"] == "Unauthorized"
    assert blank.status_code == 401


def test_overlap_suggestions_are_tagged(analysis_client: TestClient) -> None:
    response = analysis_client.post(
        "/api/suggestions",
        json={"words": ["Akkam", "jirta?"], "mode": "overlap"},
        headers=USER,
    )

    assert response.status_code == 200
    assert response.json() == {
        "kind": "overlap",
        "items": [{"sentence": "Akkam jirta?", "overlap": 2}],
    }


def test_single_suggestions_are_tagged(analysis_client: TestClient) -> None:
    response = analysis_client.post(
        "/api/suggestions",
        json={"words": ["nyaadhe"], "mode": "single"},
        headers=USER,
    )

    assert response.status_code == 200
    assert response.json() == {"kind": "single", "items": ["Nyaata mi'aawaa nyaadhe."]}


def test_suggestions_reject_unknown_mode(analysis_client: TestClient) -> None:
    response = analysis_client.post(
        "/api/suggestions",
        json={"words": ["hora"], "mode": "fuzzy"},
        headers=USER,
    )

    assert response.status_code == 422


def test_suggestions_without_user_are_unauthorized(analysis_client: TestClient) -> None:
    response = analysis_client.post("/api/suggestions", json={"words": ["hora"], "mode": "single"})

    assert response.status_code == 401


def test_suggestions_response_is_discriminated_by_kind(analysis_client: TestClient) -> None:
    parsed = TypeAdapter(SuggestionsResponse).validate_python(
        {"kind": "overlap", "items": [{"sentence": "Akkam jirta?", "overlap": 2}]}
    )
    openapi = analysis_client.get("/openapi.json").json()
    response_schema = openapi["paths"]["/api/suggestions"]["post"]["responses"]["200"]

    assert isinstance(parsed, OverlapSuggestionsResponse)
    assert '"propertyName": "kind"' in json.dumps(response_schema)
