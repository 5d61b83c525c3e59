from __future__ import annotations

from collections.abc import Iterable

from app.services.corpus.global_store import GlobalCorpusStore
from app.services.corpus.models import GLOBAL_SCOPE, IndexEntry, Scope, Sentence, SentenceId
from app.services.corpus.personal_store import PersonalCorpusStore, SentenceSource


class CorpusStore:
    """Scope-aware access to the global and personal corpora.

    Callers never see how the global index is sharded; they address entries by
    base word and scope only.
    """

    def __init__(self, global_store: GlobalCorpusStore, personal_store: PersonalCorpusStore):
        self.global_store = global_store
        self.personal_store = personal_store

    def lookup(self, base_word: str, scope: Scope) -> IndexEntry | None:
        if scope.is_global:
            return self.global_store.lookup(base_word)
        return self.personal_store.lookup(base_word, scope.user_id)

    def lookup_across_scopes(self, base_word: str, user_scope: Scope) -> list[IndexEntry]:
        entries: list[IndexEntry] = []
        for scope in (GLOBAL_SCOPE, user_scope):
            entry = self.lookup(base_word, scope)
            if entry is not None:
                entries.append(entry)
            if scope.is_global and user_scope.is_global:
                break
        return entries

    def sentences_by_ids(self, sentence_ids: Iterable[SentenceId], scope: Scope) -> list[Sentence]:
        if scope.is_global:
            return self.global_store.sentences_by_ids(sentence_ids)
        return self.personal_store.sentences_by_ids(sentence_ids, scope.user_id)

    def append_sentence(
        self,
        user_scope: Scope,
        text: str,
        source: SentenceSource = "manual",
    ) -> Sentence:
        return self.personal_store.append_sentence(self._user_id(user_scope), text, source=source)

    def append_sentences(
        self,
        user_scope: Scope,
        texts: Iterable[str],
        source: SentenceSource = "manual",
    ) -> list[Sentence]:
        return [
            self.append_sentence(user_scope, text, source=source)
            for text in texts
            if text.strip()
        ]

    def delete_sentence(self, user_scope: Scope, sentence_id: str) -> bool:
        return self.personal_store.delete_sentence(self._user_id(user_scope), sentence_id)

    def delete_entry(self, user_scope: Scope, base_word: str) -> int:
        return self.personal_store.delete_entry(self._user_id(user_scope), base_word)

    def _user_id(self, scope: Scope) -> str:
        if scope.is_global:
            raise PermissionError("The global corpus is read-only")
        return scope.user_id
