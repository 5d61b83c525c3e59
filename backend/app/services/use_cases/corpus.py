from __future__ import annotations

from app.api.schemas.v1.corpus import (
    AddSentencesResponse,
    CorpusEntryListResponse,
    CorpusEntrySummary,
    CorpusStats,
    DeleteEntryResponse,
    DeleteSentenceResponse,
    SentenceListResponse,
    SentenceSummary,
)
from app.services.corpus.models import Scope, Sentence
from app.services.corpus.normalization import normalize
from app.services.corpus.personal_store import SentenceSource
from app.services.corpus.store import CorpusStore


def _summary(sentence: Sentence) -> SentenceSummary:
    return SentenceSummary(
        id=str(sentence.id),
        sentence=sentence.text,
        source=sentence.source,
        created_at=sentence.created_at,
    )


class PersonalCorpusUseCase:
    def __init__(self, store: CorpusStore):
        self._store = store

    def add_sentences(
        self,
        user_id: str | None,
        sentences: list[str],
        source: SentenceSource = "manual",
    ) -> AddSentencesResponse:
        user_scope = Scope.for_user(user_id)
        if not any(sentence.strip() for sentence in sentences):
            raise ValueError("at least one non-empty sentence is required")

        added = self._store.append_sentences(user_scope, sentences, source=source)
        return AddSentencesResponse(
            status="inserted",
            items=[_summary(sentence) for sentence in added],
            message=f"Added {len(added)} sentence(s) to your personal corpus.",
        )

    def list_sentences(self, user_id: str | None) -> SentenceListResponse:
        user_scope = Scope.for_user(user_id)
        sentences = self._store.personal_store.list_sentences(user_scope.user_id)
        return SentenceListResponse(items=[_summary(sentence) for sentence in sentences])

    def delete_sentence(self, user_id: str | None, sentence_id: str) -> DeleteSentenceResponse:
        user_scope = Scope.for_user(user_id)
        if not self._store.delete_sentence(user_scope, sentence_id):
            raise LookupError(f"Sentence '{sentence_id}' was not found")
        return DeleteSentenceResponse(status="deleted", sentence_id=sentence_id)

    def list_entries(self, user_id: str | None) -> CorpusEntryListResponse:
        user_scope = Scope.for_user(user_id)
        entries = self._store.personal_store.list_entries(user_scope.user_id)
        return CorpusEntryListResponse(
            items=[
                CorpusEntrySummary(
                    base_word=entry.base_word,
                    variants=list(entry.variants),
                    sentence_ids=[str(sentence_id) for sentence_id in entry.sentence_ids],
                )
                for entry in entries
            ],
            stats=CorpusStats(
                total_words=len(entries),
                total_sentences=sum(len(entry.sentence_ids) for entry in entries),
                total_variants=sum(len(entry.variants) for entry in entries),
            ),
        )

    def delete_entry(self, user_id: str | None, base_word: str) -> DeleteEntryResponse:
        user_scope = Scope.for_user(user_id)
        normalized_base_word = normalize(base_word)
        if not normalized_base_word:
            raise ValueError("base_word is required")

        deleted = self._store.delete_entry(user_scope, normalized_base_word)
        return DeleteEntryResponse(
            status="deleted",
            base_word=normalized_base_word,
            deleted_sentences=deleted,
        )
