from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import UNAUTHORIZED_DETAIL, corpus_analyzer, current_user_id
from app.api.schemas.v1.analyze import AnalyzeRequest, AnalyzeResponse
from app.api.schemas.v1.suggestions import SuggestionsRequest, SuggestionsResponse
from app.services.corpus.models import UnauthorizedError
from app.services.use_cases import AnalyzeSentenceUseCase

router = APIRouter()


def _analyze_use_case(request: Request) -> AnalyzeSentenceUseCase:
    return AnalyzeSentenceUseCase(corpus_analyzer(request))


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_sentence(
    payload: AnalyzeRequest,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> AnalyzeResponse:
    # Runs without the database; personal lookups degrade per scope inside the analyzer.
    try:
        words = _analyze_use_case(request).execute(
            payload.text,
            user_id,
            include_suggestions=payload.include_suggestions,
        )
    except UnauthorizedError as exc:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL) from exc

    return AnalyzeResponse(words=words)


@router.post("/suggestions", response_model=SuggestionsResponse)
def get_suggestions(
    payload: SuggestionsRequest,
    request: Request,
    user_id: str = Depends(current_user_id),
):
    try:
        return _analyze_use_case(request).suggestions(payload.words, payload.mode, user_id)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
