from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AddSentencesRequest(BaseModel):
    sentences: list[str] = Field(..., min_length=1)
    source: Literal["manual", "project"] = "manual"


class SentenceSummary(BaseModel):
    id: str
    sentence: str
    source: str | None
    created_at: str | None


class AddSentencesResponse(BaseModel):
    status: Literal["inserted"]
    items: list[SentenceSummary]
    message: str


class SentenceListResponse(BaseModel):
    items: list[SentenceSummary]


class DeleteSentenceResponse(BaseModel):
    status: Literal["deleted"]
    sentence_id: str


class CorpusEntrySummary(BaseModel):
    base_word: str
    variants: list[str]
    sentence_ids: list[str]


class CorpusStats(BaseModel):
    total_words: int
    total_sentences: int
    total_variants: int


class CorpusEntryListResponse(BaseModel):
    items: list[CorpusEntrySummary]
    stats: CorpusStats


class DeleteEntryResponse(BaseModel):
    status: Literal["deleted"]
    base_word: str
    deleted_sentences: int
