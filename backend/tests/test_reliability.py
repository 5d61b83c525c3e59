from __future__ import annotations

from dataclasses import replace

from fastapi.testclient import TestClient

from app.main import create_app
from app.services.corpus.global_store import GlobalCorpusStore


USER = {"X-User-Id": "user-1"}


def test_personal_sentence_persists_across_backend_restart(settings_with_corpus) -> None:
    app_first = create_app(settings=settings_with_corpus)
    with TestClient(app_first) as client:
        add_response = client.post(
            "/api/corpus/sentences",
            json={"sentences": ["Gammachuun dhufe"]},
            headers=USER,
        )
        assert add_response.status_code == 200

    app_second = create_app(settings=settings_with_corpus)
    with TestClient(app_second) as client:
        analyze_response = client.post("/api/analyze", json={"text": "Gammachuun"}, headers=USER)

    assert analyze_response.status_code == 200
    words = analyze_response.json()["words"]
    assert len(words) == 1
    assert words[0]["base_word"] == "gamachun"
    assert words[0]["status"] == "correct"


def test_invalid_db_path_degrades_personal_routes_but_keeps_global_analysis(
    tmp_path,
    settings_with_corpus,
) -> None:
    blocked_parent = tmp_path / "blocked-parent"
    blocked_parent.write_text("not-a-directory", encoding="utf-8")
    settings = replace(settings_with_corpus, db_path=blocked_parent / "jecha.sqlite3")

    app = create_app(settings=settings)
    with TestClient(app) as client:
        health_response = client.get("/api/health")
        analyze_response = client.post(
            "/api/analyze",
            json={"text": "Hoorraa hora xyz"},
            headers=USER,
        )
        suggestions_response = client.post(
            "/api/suggestions",
            json={"words": ["Hoorraa", "guddaa"], "mode": "overlap"},
            headers=USER,
        )
        add_response = client.post(
            "/api/corpus/sentences",
            json={"sentences": ["hora"]},
            headers=USER,
        )

    assert health_response.status_code == 200
    health = health_response.json()
    assert health["status"] == "degraded"
    assert health["components"] == {"database": "degraded", "global_corpus": "ok"}

    assert analyze_response.status_code == 200
    assert [(item["word"], item["status"]) for item in analyze_response.json()["words"]] == [
        ("Hoorraa", "correct"),
        ("hora", "variant"),
        ("xyz", "unknown"),
    ]
    assert suggestions_response.status_code == 200
    assert suggestions_response.json()["items"] == [{"sentence": "Hoorraa guddaa qabna.", "overlap": 2}]
    assert add_response.status_code == 503
    assert "Database unavailable" in add_response.json()["detail"]


def test_global_corpus_failure_still_serves_personal_analysis(settings_factory) -> None:
    def failing_global_store_factory(_settings) -> GlobalCorpusStore:
        raise RuntimeError("corpus init failed")

    app = create_app(settings=settings_factory(), global_store_factory=failing_global_store_factory)
    with TestClient(app) as client:
        health = client.get("/api/health").json()
        client.post("/api/corpus/sentences", json={"sentences": ["nagaa"]}, headers=USER)
        analyze_response = client.post("/api/analyze", json={"text": "nagaa Hoorraa"}, headers=USER)

    assert health["components"] == {"database": "ok", "global_corpus": "degraded"}
    assert health["global_corpus_error"] == "corpus init failed"
    assert [item["status"] for item in analyze_response.json()["words"]] == ["correct", "unknown"]


def test_unreadable_global_shard_does_not_fail_analysis(settings_with_corpus) -> None:
    (settings_with_corpus.global_corpus_dir / "index_h.json").write_text("garbage", encoding="utf-8")

    app = create_app(settings=settings_with_corpus)
    with TestClient(app) as client:
        response = client.post("/api/analyze", json={"text": "Hoorraa Akkam"}, headers=USER)

    assert response.status_code == 200
    assert [item["status"] for item in response.json()["words"]] == ["unknown", "correct"]
