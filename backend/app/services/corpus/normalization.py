from __future__ import annotations

import re


# Characters removed from anywhere in a token, not only at its edges.
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()?]")
REPEATED_CHARACTER_PATTERN = re.compile(r"(.)\1+")


def tokenize(text: str) -> list[str]:
    return text.split() if text else []


def strip_punctuation(token: str) -> str:
    if not token:
        return ""
    return PUNCTUATION_PATTERN.sub("", token)


def normalize(token: str) -> str:
    """Return the base word of `token`.

    Punctuation is stripped, the result is lower-cased and every run of two or
    more identical characters collapses to one ("Hoorraa" -> "hora"). Many
    spellings share one base word, which is what variant detection relies on.
    An empty result means the token carries nothing indexable.
    """
    if not token:
        return ""
    cleaned = strip_punctuation(token).lower()
    return REPEATED_CHARACTER_PATTERN.sub(r"\1", cleaned)


def base_words(text: str) -> list[str]:
    return [normalize(token) for token in tokenize(text)]
