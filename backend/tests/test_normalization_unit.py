from __future__ import annotations

import pytest

from app.services.corpus.normalization import base_words, normalize, strip_punctuation, tokenize


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("Hoorraa", "hora"),
        ("gabbata!", "gabata"),
        ("...", ""),
        ("AAbbCC", "abc"),
        ("gabata", "gabata"),
        ("aaa", "a"),
        ("(barbaada)", "barbada"),
        ("mi'aawaa", "mi'awa"),
        ("", ""),
    ],
)
def test_normalize_examples(token: str, expected: str) -> None:
    assert normalize(token) == expected


@pytest.mark.parametrize("token", ["Hoorraa", "gabbata!", "AaAa", "x--y", "Nyaadhe.", "ccccc"])
def test_normalize_is_idempotent(token: str) -> None:
    assert normalize(normalize(token)) == normalize(token)


def test_variants_share_one_base_word() -> None:
    assert normalize("gabbata") == normalize("gabata") == "gabata"


def test_strip_punctuation_removes_characters_anywhere() -> None:
    assert strip_punctuation("ja-la_le?") == "jalale"
    assert strip_punctuation("{x}=(y)") == "xy"
    assert strip_punctuation("har'aa") == "har'aa"


def test_tokenize_splits_on_whitespace_runs() -> None:
    assert tokenize("  Akkam \t jirta?\n") == ["Akkam", "jirta?"]
    assert tokenize("") == []


def test_base_words_of_sentence() -> None:
    assert base_words("Maqaan koo Caaltuu dha.") == ["maqan", "ko", "caltu", "dha"]
