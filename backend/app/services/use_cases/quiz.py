from __future__ import annotations

import random
from typing import Literal

from app.api.schemas.v1.quiz import QuizSentence, QuizSentencesResponse
from app.services.corpus.models import Scope
from app.services.corpus.normalization import base_words
from app.services.corpus.store import CorpusStore


QuizSource = Literal["global", "personal"]


def quiz_hint(sentence: str) -> str:
    # The learner sees the collapsed spelling and has to restore the double letters.
    return " ".join(base_words(sentence))


class QuizUseCase:
    def __init__(self, store: CorpusStore, rng: random.Random | None = None):
        self._store = store
        self._rng = rng or random.Random()

    def sentences(self, user_id: str | None, count: int, source: QuizSource) -> QuizSentencesResponse:
        user_scope = Scope.for_user(user_id)
        if count < 1:
            raise ValueError("count must be at least 1")

        if source == "personal":
            available = self._store.personal_store.count_sentences(user_scope.user_id)
            if available < count:
                raise ValueError(
                    f"Not enough sentences in your personal corpus (found {available}). "
                    f"You need at least {count}."
                )
            texts = [
                sentence.text
                for sentence in self._store.personal_store.random_sentences(user_scope.user_id, count)
            ]
        else:
            global_store = self._store.global_store
            if global_store.sentence_count < count:
                raise ValueError("Not enough sentences in the global corpus.")
            sentence_ids = self._rng.sample(range(global_store.sentence_count), count)
            texts = [sentence.text for sentence in global_store.sentences_by_ids(sentence_ids)]

        return QuizSentencesResponse(
            source=source,
            sentences=[QuizSentence(correct=text, hint=quiz_hint(text)) for text in texts],
        )
