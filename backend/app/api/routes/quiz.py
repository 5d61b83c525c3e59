from __future__ import annotations

import logging
import sqlite3
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.api.deps import corpus_store, current_user_id, require_db_ready
from app.api.schemas.v1.quiz import QuizSentencesResponse
from app.services.use_cases import QuizUseCase

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/quiz/sentences", response_model=QuizSentencesResponse)
def get_quiz_sentences(
    request: Request,
    count: int = Query(default=5, ge=1, le=50),
    source: Literal["global", "personal"] = "global",
    user_id: str = Depends(current_user_id),
) -> QuizSentencesResponse:
    if source == "personal":
        require_db_ready(request)

    try:
        return QuizUseCase(corpus_store(request)).sentences(user_id, count, source)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except sqlite3.OperationalError as exc:
        logger.exception("quiz_db_operational_error")
        raise HTTPException(
            status_code=503,
            detail=f"Database unavailable: {exc}",
        ) from exc
