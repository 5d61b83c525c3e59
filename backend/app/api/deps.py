from __future__ import annotations

from fastapi import Header, HTTPException, Request

from app.services.corpus.analyzer import CorpusAnalyzer
from app.services.corpus.store import CorpusStore


UNAUTHORIZED_DETAIL = "Unauthorized"


def current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    # Identity is established upstream; this layer only requires that it was forwarded.
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)
    return user_id


def require_db_ready(request: Request) -> None:
    if not bool(getattr(request.app.state, "db_ready", False)):
        raise HTTPException(
            status_code=503,
            detail="Database unavailable. Check backend logs and DB path configuration.",
        )


def corpus_store(request: Request) -> CorpusStore:
    store = getattr(request.app.state, "corpus_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Corpus store unavailable.")
    return store


def corpus_analyzer(request: Request) -> CorpusAnalyzer:
    settings = request.app.state.settings
    return CorpusAnalyzer(
        corpus_store(request),
        variant_suggestion_limit=settings.variant_suggestion_limit,
        single_sentence_limit=settings.single_sentence_limit,
        overlap_limit=settings.overlap_limit,
    )
