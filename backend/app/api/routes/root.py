from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "jecha backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    db_ready = bool(getattr(request.app.state, "db_ready", False))
    corpus_ready = bool(getattr(request.app.state, "global_corpus_ready", False))
    status = "ok" if db_ready and corpus_ready else "degraded"
    payload: dict[str, object] = {
        "status": status,
        "service": "backend",
        "components": {
            "database": "ok" if db_ready else "degraded",
            "global_corpus": "ok" if corpus_ready else "degraded",
        },
    }

    db_error = getattr(request.app.state, "db_error", None)
    corpus_error = getattr(request.app.state, "global_corpus_error", None)
    if db_error:
        payload["db_error"] = str(db_error)
    if corpus_error:
        payload["global_corpus_error"] = str(corpus_error)

    return payload
