from __future__ import annotations

from collections import Counter

# Apostrophes and hyphens stay inside words ("i'd", "scikit-learn").
PUNCTUATION = '.,;:!?"\n'

_BLANK = str.maketrans({c: " " for c in PUNCTUATION})


def normalize(text: str) -> str:
    return text.lower().translate(_BLANK)


def tokenize(text: str) -> list[str]:
    return [t for t in normalize(text).split(" ") if t]


def word_counts(text: str) -> Counter[str]:
    """Count every token of `text` after normalization.

    Missing words read as 0, so callers can look up any reference word.
    """
    return Counter(tokenize(text))
