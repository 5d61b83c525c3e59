from app.api.schemas.v1.analyze import AnalyzeRequest, AnalyzeResponse, WordAnalysisItem
from app.api.schemas.v1.corpus import (
    AddSentencesRequest,
    AddSentencesResponse,
    CorpusEntryListResponse,
    CorpusEntrySummary,
    CorpusStats,
    DeleteEntryResponse,
    DeleteSentenceResponse,
    SentenceListResponse,
    SentenceSummary,
)
from app.api.schemas.v1.quiz import QuizSentence, QuizSentencesResponse
from app.api.schemas.v1.suggestions import (
    OverlapItem,
    OverlapSuggestionsResponse,
    SingleSuggestionsResponse,
    SuggestionsRequest,
    SuggestionsResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "WordAnalysisItem",
    "SuggestionsRequest",
    "SuggestionsResponse",
    "SingleSuggestionsResponse",
    "OverlapSuggestionsResponse",
    "OverlapItem",
    "AddSentencesRequest",
    "AddSentencesResponse",
    "SentenceSummary",
    "SentenceListResponse",
    "DeleteSentenceResponse",
    "CorpusEntrySummary",
    "CorpusStats",
    "CorpusEntryListResponse",
    "DeleteEntryResponse",
    "QuizSentence",
    "QuizSentencesResponse",
]
