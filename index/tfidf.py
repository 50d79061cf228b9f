from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from processing.text import word_counts

logger = logging.getLogger(__name__)


class TfidfError(ValueError):
    pass


class EmptyCorpusError(TfidfError):
    def __init__(self) -> None:
        super().__init__("corpus has no reference document")


class EmptyDocumentError(TfidfError):
    def __init__(self, index: int) -> None:
        super().__init__(f"document {index} has no words")
        self.index = index


class UnseenWordError(TfidfError):
    def __init__(self, word: str) -> None:
        super().__init__(f"word never observed in any document: {word!r}")
        self.word = word


def count_documents(documents: Iterable[str]) -> list[Counter[str]]:
    """Word counts for each document, built once and shared by TF and IDF."""
    return [word_counts(d) for d in documents]


def total_words(counts: Mapping[str, int]) -> int:
    return sum(counts.values())


def compute_tf(
    ref_words: Iterable[str],
    doc_counts: Sequence[Mapping[str, int]],
    *,
    strict_empty: bool = False,
) -> list[dict[str, float]]:
    """Term frequency of each reference word in each document.

    tf(t, d) = freq(t, d) / |d|, where |d| counts every word of the document,
    not only reference words. A document without words scores 0 for every
    word unless `strict_empty` is set, in which case it raises
    EmptyDocumentError.
    """
    words = list(ref_words)
    table: list[dict[str, float]] = []
    for i, counts in enumerate(doc_counts):
        n = total_words(counts)
        if n == 0:
            if strict_empty:
                raise EmptyDocumentError(i)
            logger.debug("document %d is empty; tf set to 0", i)
            table.append({w: 0.0 for w in words})
            continue
        table.append({w: counts.get(w, 0) / n for w in words})
    return table


def document_frequency(word: str, doc_counts: Iterable[Mapping[str, int]]) -> int:
    return sum(1 for counts in doc_counts if counts.get(word, 0) > 0)


def compute_idf(
    ref_words: Iterable[str], doc_counts: Sequence[Mapping[str, int]]
) -> dict[str, float]:
    """Inverse document frequency idf(t, D) = ln(|D| / df(t)).

    A word present in every document gets 0. A word present in none raises
    UnseenWordError.
    """
    n = len(doc_counts)
    idf: dict[str, float] = {}
    for w in ref_words:
        df = document_frequency(w, doc_counts)
        if df == 0:
            raise UnseenWordError(w)
        idf[w] = math.log(n / df)
    return idf


def compute_tfidf(
    ref_words: Iterable[str],
    tf: Sequence[Mapping[str, float]],
    idf: Mapping[str, float],
) -> list[dict[str, float]]:
    words = list(ref_words)
    table: list[dict[str, float]] = []
    for row in tf:
        cells: dict[str, float] = {}
        for w in words:
            t = row.get(w, 0.0)
            i = idf.get(w, 0.0)
            # zero in either factor stores an exact 0
            cells[w] = t * i if t and i else 0.0
        table.append(cells)
    return table
