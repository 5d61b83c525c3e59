from __future__ import annotations

from collections.abc import Iterable

from app.services.corpus.models import IndexEntry, Scope, SentenceId
from app.services.corpus.normalization import normalize, strip_punctuation, tokenize


OTHER_SHARD = "other"


def sentence_occurrences(text: str) -> dict[str, tuple[str, ...]]:
    """Map each distinct base word of `text` to the surface variants seen for it.

    Variants keep their case and first-seen order. Tokens that are nothing but
    punctuation are skipped.
    """
    occurrences: dict[str, dict[str, None]] = {}
    for token in tokenize(text):
        variant = strip_punctuation(token)
        if not variant:
            continue
        base_word = normalize(variant)
        if not base_word:
            continue
        occurrences.setdefault(base_word, {})[variant] = None
    return {base_word: tuple(variants) for base_word, variants in occurrences.items()}


def shard_key(base_word: str) -> str:
    first_char = base_word[:1]
    if "a" <= first_char <= "z":
        return first_char
    return OTHER_SHARD


class IndexBuilder:
    def __init__(self, scope: Scope):
        self.scope = scope
        self._variants: dict[str, dict[str, None]] = {}
        self._sentence_ids: dict[str, dict[SentenceId, None]] = {}

    def add_sentence(self, sentence_id: SentenceId, text: str) -> tuple[str, ...]:
        occurrences = sentence_occurrences(text)
        for base_word, variants in occurrences.items():
            known_variants = self._variants.setdefault(base_word, {})
            for variant in variants:
                known_variants[variant] = None
            self._sentence_ids.setdefault(base_word, {})[sentence_id] = None
        return tuple(occurrences)

    def entries(self) -> list[IndexEntry]:
        return [
            IndexEntry(
                base_word=base_word,
                scope=self.scope,
                variants=tuple(self._variants[base_word]),
                sentence_ids=tuple(self._sentence_ids[base_word]),
            )
            for base_word in sorted(self._variants)
        ]

    def __len__(self) -> int:
        return len(self._variants)


def build_index(sentences: Iterable[tuple[SentenceId, str]], scope: Scope) -> list[IndexEntry]:
    builder = IndexBuilder(scope)
    for sentence_id, text in sentences:
        builder.add_sentence(sentence_id, text)
    return builder.entries()
