from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class QuizSentence(BaseModel):
    correct: str
    hint: str


class QuizSentencesResponse(BaseModel):
    source: Literal["global", "personal"]
    sentences: list[QuizSentence]
