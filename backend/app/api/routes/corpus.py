from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import UNAUTHORIZED_DETAIL, corpus_store, current_user_id, require_db_ready
from app.api.schemas.v1.corpus import (
    AddSentencesRequest,
    AddSentencesResponse,
    CorpusEntryListResponse,
    DeleteEntryResponse,
    DeleteSentenceResponse,
    SentenceListResponse,
)
from app.services.corpus.models import UnauthorizedError
from app.services.use_cases import PersonalCorpusUseCase

router = APIRouter()
logger = logging.getLogger(__name__)


def _corpus_use_case(request: Request) -> PersonalCorpusUseCase:
    require_db_ready(request)
    return PersonalCorpusUseCase(corpus_store(request))


def _database_unavailable(exc: sqlite3.OperationalError) -> HTTPException:
    logger.exception("corpus_db_operational_error")
    return HTTPException(status_code=503, detail=f"Database unavailable: {exc}")


@router.post("/corpus/sentences", response_model=AddSentencesResponse)
def add_sentences(
    payload: AddSentencesRequest,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> AddSentencesResponse:
    use_case = _corpus_use_case(request)
    try:
        return use_case.add_sentences(user_id, payload.sentences, source=payload.source)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except sqlite3.OperationalError as exc:
        raise _database_unavailable(exc) from exc


@router.get("/corpus/sentences", response_model=SentenceListResponse)
def list_sentences(
    request: Request,
    user_id: str = Depends(current_user_id),
) -> SentenceListResponse:
    use_case = _corpus_use_case(request)
    try:
        return use_case.list_sentences(user_id)
    except sqlite3.OperationalError as exc:
        raise _database_unavailable(exc) from exc


@router.delete("/corpus/sentences/{sentence_id}", response_model=DeleteSentenceResponse)
def delete_sentence(
    sentence_id: str,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> DeleteSentenceResponse:
    use_case = _corpus_use_case(request)
    try:
        return use_case.delete_sentence(user_id, sentence_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except sqlite3.OperationalError as exc:
        raise _database_unavailable(exc) from exc


@router.get("/corpus/entries", response_model=CorpusEntryListResponse)
def list_entries(
    request: Request,
    user_id: str = Depends(current_user_id),
) -> CorpusEntryListResponse:
    use_case = _corpus_use_case(request)
    try:
        return use_case.list_entries(user_id)
    except sqlite3.OperationalError as exc:
        raise _database_unavailable(exc) from exc


@router.delete("/corpus/entries/{base_word}", response_model=DeleteEntryResponse)
def delete_entry(
    base_word: str,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> DeleteEntryResponse:
    use_case = _corpus_use_case(request)
    try:
        return use_case.delete_entry(user_id, base_word)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except sqlite3.OperationalError as exc:
        raise _database_unavailable(exc) from exc
