from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class SuggestionsRequest(BaseModel):
    words: list[str] = Field(default_factory=list)
    mode: Literal["single", "overlap"] = "single"


class SingleSuggestionsResponse(BaseModel):
    kind: Literal["single"] = "single"
    items: list[str]


class OverlapItem(BaseModel):
    sentence: str
    overlap: int


class OverlapSuggestionsResponse(BaseModel):
    kind: Literal["overlap"] = "overlap"
    items: list[OverlapItem]


SuggestionsResponse = Annotated[
    SingleSuggestionsResponse | OverlapSuggestionsResponse,
    Field(discriminator="kind"),
]
