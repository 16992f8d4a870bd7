# src/minirag/core/services/ranking.py
"""Cosine ranking over a flat list of documents.

* Similarity is `dot(a, b) / (|a| * |b|)`, computed on unit vectors.
* Zero-magnitude vectors (empty or all zeros) score 0.0.
* Non-finite values (nan, inf) score 0.0.
* Vectors of different dimension score 0.0 and are reported as a warning.
* Documents without an embedding are excluded from the result.
* Equal scores keep insertion order (stable sort).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from minirag.core.domain.entities import Document, Embedding
from minirag.core.ports import RankerPort

__all__ = ["CosineRanker", "cosine_similarity"]

logger = logging.getLogger(__name__)


def _unit(vector: Embedding) -> Optional[np.ndarray]:
    arr = np.asarray(vector, dtype=np.float64)
    if not np.isfinite(arr).all():
        return None
    # pre-scale by the largest component so the norm cannot overflow
    scale = np.max(np.abs(arr))
    if scale == 0.0:
        return None
    arr = arr / scale
    return arr / np.linalg.norm(arr)


def cosine_similarity(a: Embedding, b: Embedding) -> float:
    if len(a) != len(b) or len(a) == 0:
        return 0.0

    unit_a = _unit(a)
    unit_b = _unit(b)
    if unit_a is None or unit_b is None:
        return 0.0

    score = float(np.dot(unit_a, unit_b))
    if not np.isfinite(score):
        return 0.0
    return min(1.0, max(-1.0, score))


class CosineRanker(RankerPort):
    def rank(
        self, query_vector: Embedding, documents: Sequence[Document], limit: int = 3
    ) -> Tuple[List[Document], List[float]]:
        """Score every embedded document against the query and keep the best.

        Parameters
        ----------
        query_vector : Embedding
            Query embedding. May be empty (no signal).
        documents : Sequence[Document]
            Candidates, in insertion order.
        limit : int, default 3
            Maximum number of documents returned.

        Returns
        -------
        Tuple[List[Document], List[float]]
            Parallel lists of documents and similarity scores, best first.

        Notes
        -----
        Returns empty lists if `limit <= 0`.
        """
        if limit <= 0:
            return [], []

        scored: List[Tuple[Document, float]] = []
        for doc in documents:
            if doc.embedding is None:
                logger.warning(f"Document {doc.id!r} has no embedding; excluded from ranking")
                continue
            if len(query_vector) and len(doc.embedding) and len(doc.embedding) != len(query_vector):
                logger.warning(
                    f"Dimension mismatch for document {doc.id!r}: "
                    f"query ({len(query_vector)}) vs document ({len(doc.embedding)}). Scoring 0."
                )
            scored.append((doc, cosine_similarity(query_vector, doc.embedding)))

        # sorted() is stable, so ties keep insertion order even with reverse=True
        top = sorted(scored, key=lambda t: t[1], reverse=True)[:limit]
        logger.debug(f"Ranked scores: {[(d.id, s) for d, s in top]}")

        docs, scores = zip(*top) if top else ([], [])
        return list(docs), list(scores)
