from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence

from app.services.corpus.models import (
    GLOBAL_SCOPE,
    IndexEntry,
    OverlapSuggestion,
    OverlapSuggestions,
    Scope,
    Sentence,
    SentenceId,
    SingleSuggestions,
    SuggestionMode,
    SuggestionResult,
    WordAnalysis,
)
from app.services.corpus.normalization import normalize, strip_punctuation, tokenize
from app.services.corpus.store import CorpusStore


logger = logging.getLogger(__name__)


class CorpusAnalyzer:
    def __init__(
        self,
        store: CorpusStore,
        *,
        variant_suggestion_limit: int = 5,
        single_sentence_limit: int = 10,
        overlap_limit: int = 10,
    ):
        self.store = store
        self.variant_suggestion_limit = variant_suggestion_limit
        self.single_sentence_limit = single_sentence_limit
        self.overlap_limit = overlap_limit

    def analyze_sentence(
        self,
        text: str,
        user_id: str | None,
        *,
        include_suggestions: bool = True,
    ) -> list[WordAnalysis]:
        """Classify each token of `text` as correct, variant or unknown.

        A token is correct when its punctuation-stripped spelling is attested
        for its base word in the global corpus or the caller's personal corpus,
        a variant when only the base word is attested, and unknown otherwise.
        Positions refer to whitespace tokens of `text`; punctuation-only tokens
        produce no analysis.
        """
        user_scope = Scope.for_user(user_id)

        analyses: list[WordAnalysis] = []
        for position, token in enumerate(tokenize(text)):
            word = strip_punctuation(token)
            if not word:
                continue
            base_word = normalize(word)
            analyses.append(
                self._analyze_word(
                    word=word,
                    base_word=base_word,
                    position=position,
                    user_scope=user_scope,
                    include_suggestions=include_suggestions,
                )
            )
        return analyses

    def get_suggestions(
        self,
        words: Sequence[str],
        mode: SuggestionMode,
        user_id: str | None,
    ) -> SuggestionResult:
        user_scope = Scope.for_user(user_id)
        if mode == "single":
            return self._single_suggestions(words, user_scope)
        if mode == "overlap":
            return self._overlap_suggestions(words, user_scope)
        raise ValueError(f"Unsupported suggestion mode: {mode}")

    def _analyze_word(
        self,
        *,
        word: str,
        base_word: str,
        position: int,
        user_scope: Scope,
        include_suggestions: bool,
    ) -> WordAnalysis:
        entries = self._lookup_entries(base_word, user_scope)
        if not entries:
            return WordAnalysis(word=word, base_word=base_word, status="unknown", position=position)

        variants = tuple(dict.fromkeys(variant for entry in entries for variant in entry.variants))
        if word in variants:
            return WordAnalysis(word=word, base_word=base_word, status="correct", position=position)

        suggestions = variants[: self.variant_suggestion_limit] if include_suggestions else ()
        return WordAnalysis(
            word=word,
            base_word=base_word,
            status="variant",
            position=position,
            suggestions=suggestions,
        )

    def _lookup_entries(self, base_word: str, user_scope: Scope) -> list[IndexEntry]:
        # A scope whose storage fails contributes nothing; the other scope still answers.
        entries: list[IndexEntry] = []
        for scope in (GLOBAL_SCOPE, user_scope):
            try:
                entry = self.store.lookup(base_word, scope)
            except (sqlite3.Error, OSError):
                logger.exception(
                    "corpus_scope_lookup_failed",
                    extra={"base_word": base_word, "scope": str(scope)},
                )
                continue
            if entry is not None:
                entries.append(entry)
        return entries

    def _resolve_sentences(self, sentence_ids: Sequence[SentenceId], scope: Scope) -> list[Sentence]:
        try:
            return self.store.sentences_by_ids(sentence_ids, scope)
        except (sqlite3.Error, OSError):
            logger.exception(
                "corpus_scope_sentences_failed",
                extra={"sentence_ids": len(sentence_ids), "scope": str(scope)},
            )
            return []

    def _single_suggestions(self, words: Sequence[str], user_scope: Scope) -> SingleSuggestions:
        if not words:
            return SingleSuggestions()
        base_word = normalize(words[0])
        if not base_word:
            return SingleSuggestions()

        sentences: dict[str, None] = {}
        for entry in self._lookup_entries(base_word, user_scope):
            sentence_ids = entry.sentence_ids[: self.single_sentence_limit]
            for sentence in self._resolve_sentences(sentence_ids, entry.scope):
                sentences[sentence.text] = None
        return SingleSuggestions(items=tuple(sentences))

    def _overlap_suggestions(self, words: Sequence[str], user_scope: Scope) -> OverlapSuggestions:
        query_base_words = list(dict.fromkeys(base for base in map(normalize, words) if base))
        if not query_base_words:
            return OverlapSuggestions()

        # Global and personal ids live in separate id spaces, so counts are keyed by scope too.
        overlap_counts: dict[tuple[Scope, SentenceId], int] = {}
        for base_word in query_base_words:
            for entry in self._lookup_entries(base_word, user_scope):
                for sentence_id in dict.fromkeys(entry.sentence_ids):
                    key = (entry.scope, sentence_id)
                    overlap_counts[key] = overlap_counts.get(key, 0) + 1

        ranked = sorted(
            ((key, count) for key, count in overlap_counts.items() if count > 1),
            key=lambda item: (-item[1], 0 if item[0][0].is_global else 1, item[0][1]),
        )[: self.overlap_limit]

        resolved: dict[tuple[Scope, SentenceId], str] = {}
        for scope in (GLOBAL_SCOPE, user_scope):
            sentence_ids = [sentence_id for (key_scope, sentence_id), _ in ranked if key_scope == scope]
            if not sentence_ids:
                continue
            for sentence in self._resolve_sentences(sentence_ids, scope):
                resolved[(scope, sentence.id)] = sentence.text

        return OverlapSuggestions(
            items=tuple(
                OverlapSuggestion(sentence=resolved[key], overlap=count)
                for key, count in ranked
                if key in resolved
            )
        )
