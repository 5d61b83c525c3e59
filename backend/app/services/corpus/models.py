from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


WordStatus = Literal["correct", "variant", "unknown"]
SuggestionMode = Literal["single", "overlap"]
SentenceId = int | str


class UnauthorizedError(PermissionError):
    """Raised when a personal-scope operation has no caller identity."""


@dataclass(frozen=True)
class Scope:
    user_id: str | None = None

    @property
    def is_global(self) -> bool:
        return self.user_id is None

    @classmethod
    def for_user(cls, user_id: str | None) -> Scope:
        cleaned = (user_id or "").strip()
        if not cleaned:
            raise UnauthorizedError("Unauthorized")
        return cls(user_id=cleaned)

    def __str__(self) -> str:
        return "global" if self.is_global else f"user:{self.user_id}"


GLOBAL_SCOPE = Scope()


@dataclass(frozen=True)
class Sentence:
    id: SentenceId
    text: str
    scope: Scope
    source: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class IndexEntry:
    base_word: str
    scope: Scope
    variants: tuple[str, ...] = ()
    sentence_ids: tuple[SentenceId, ...] = ()


@dataclass(frozen=True)
class WordAnalysis:
    word: str
    base_word: str
    status: WordStatus
    position: int
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class OverlapSuggestion:
    sentence: str
    overlap: int


@dataclass(frozen=True)
class SingleSuggestions:
    items: tuple[str, ...] = ()
    kind: Literal["single"] = field(default="single", init=False)


@dataclass(frozen=True)
class OverlapSuggestions:
    items: tuple[OverlapSuggestion, ...] = ()
    kind: Literal["overlap"] = field(default="overlap", init=False)


SuggestionResult = SingleSuggestions | OverlapSuggestions
