from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    text: str = Field(...)
    include_suggestions: bool = True


class WordAnalysisItem(BaseModel):
    word: str
    base_word: str
    status: Literal["correct", "variant", "unknown"]
    position: int
    suggestions: list[str] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    words: list[WordAnalysisItem]
