from fastapi.testclient import TestClient

from app.main import create_app


def test_health_route_returns_expected_shape(settings_with_corpus) -> None:
    app = create_app(settings_with_corpus)
    with TestClient(app) as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "backend"
    assert payload["components"] == {"database": "ok", "global_corpus": "ok"}


def test_health_is_degraded_without_global_corpus(settings_factory) -> None:
    app = create_app(settings_factory())
    with TestClient(app) as client:
        payload = client.get("/api/health").json()

    assert payload["status"] == "degraded"
    assert payload["components"]["database"] == "ok"
    assert payload["components"]["global_corpus"] == "degraded"
    assert "Global corpus not found" in payload["global_corpus_error"]


def test_cors_allows_configured_origin(settings_factory) -> None:
    settings = settings_factory(cors_origins=("http://127.0.0.1:5173",))
    app = create_app(settings=settings)

    with TestClient(app) as client:
        response = client.options(
            "/api/health",
            headers={
                "Origin": "http://127.0.0.1:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://127.0.0.1:5173"
