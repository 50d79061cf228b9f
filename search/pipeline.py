from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass

from index.tfidf import (
    EmptyCorpusError,
    compute_idf,
    compute_tf,
    compute_tfidf,
    count_documents,
)
from search.config import SimilarityConfig

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENTS: tuple[str, ...] = (
    "I'd... like, an! apple.",
    "An apple a day keeps the doctor away.",
    "Never compare an apple to an orange.",
    "I prefer scikit-learn to orange.",
)


@dataclass
class SimilarityReport:
    vocabulary: dict[str, int]
    tf: list[dict[str, float]]
    idf: dict[str, float]
    tfidf: list[dict[str, float]]
    scores: list[float]
    most_similar: int | None

    def to_dict(self) -> dict:
        return asdict(self)


def document_scores(
    ref_words: Iterable[str], tfidf: Sequence[Mapping[str, float]]
) -> list[float]:
    words = list(ref_words)
    # fsum is exactly rounded, so vocabulary order cannot change a score
    return [math.fsum(row.get(w, 0.0) for w in words) for row in tfidf]


def most_similar_document(
    ref_words: Iterable[str], tfidf: Sequence[Mapping[str, float]]
) -> int | None:
    """Pick the document with the largest summed TF-IDF, skipping the reference.

    The result is the winner's 1-based position among the documents that
    follow the reference one (its index in `tfidf`). Ties go to the later
    document, and a candidate scoring 0 still beats the initial max of 0.
    Returns None when there is no candidate.
    """
    scores = document_scores(ref_words, tfidf)
    best: int | None = None
    best_sum = 0.0
    for i in range(1, len(scores)):
        if scores[i] >= best_sum:
            best_sum = scores[i]
            best = i
    return best


def run_similarity(
    documents: Sequence[str], cfg: SimilarityConfig | None = None
) -> SimilarityReport:
    cfg = cfg or SimilarityConfig()
    if not documents:
        raise EmptyCorpusError()

    doc_counts = count_documents(documents)
    vocabulary = dict(doc_counts[0])
    logger.debug("reference vocabulary: %s", vocabulary)

    tf = compute_tf(vocabulary, doc_counts, strict_empty=cfg.strict_empty)
    idf = compute_idf(vocabulary, doc_counts)
    logger.debug("idf: %s", idf)
    tfidf = compute_tfidf(vocabulary, tf, idf)

    scores = document_scores(vocabulary, tfidf)
    winner = most_similar_document(vocabulary, tfidf)
    logger.debug("scores: %s; most similar: %s", scores, winner)
    return SimilarityReport(
        vocabulary=vocabulary,
        tf=tf,
        idf=idf,
        tfidf=tfidf,
        scores=scores,
        most_similar=winner,
    )
