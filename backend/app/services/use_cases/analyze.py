from __future__ import annotations

from collections.abc import Sequence

from app.api.schemas.v1.analyze import WordAnalysisItem
from app.api.schemas.v1.suggestions import (
    OverlapItem,
    OverlapSuggestionsResponse,
    SingleSuggestionsResponse,
)
from app.services.corpus.analyzer import CorpusAnalyzer
from app.services.corpus.models import OverlapSuggestions, SuggestionMode


class AnalyzeSentenceUseCase:
    def __init__(self, analyzer: CorpusAnalyzer):
        self._analyzer = analyzer

    def execute(
        self,
        text: str,
        user_id: str | None,
        include_suggestions: bool = True,
    ) -> list[WordAnalysisItem]:
        return [
            WordAnalysisItem(
                word=analysis.word,
                base_word=analysis.base_word,
                status=analysis.status,
                position=analysis.position,
                suggestions=list(analysis.suggestions),
            )
            for analysis in self._analyzer.analyze_sentence(
                text,
                user_id,
                include_suggestions=include_suggestions,
            )
        ]

    def suggestions(
        self,
        words: Sequence[str],
        mode: SuggestionMode,
        user_id: str | None,
    ) -> SingleSuggestionsResponse | OverlapSuggestionsResponse:
        result = self._analyzer.get_suggestions(words, mode, user_id)
        if isinstance(result, OverlapSuggestions):
            return OverlapSuggestionsResponse(
                items=[
                    OverlapItem(sentence=item.sentence, overlap=item.overlap)
                    for item in result.items
                ]
            )
        return SingleSuggestionsResponse(items=list(result.items))
