from app.api.schemas.v1 import (
    AddSentencesRequest,
    AddSentencesResponse,
    AnalyzeRequest,
    AnalyzeResponse,
    CorpusEntryListResponse,
    QuizSentencesResponse,
    SuggestionsRequest,
    SuggestionsResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "SuggestionsRequest",
    "SuggestionsResponse",
    "AddSentencesRequest",
    "AddSentencesResponse",
    "CorpusEntryListResponse",
    "QuizSentencesResponse",
]
