# src/minirag/core/services/embedding.py
from __future__ import annotations

import logging
from typing import Callable, List

import numpy as np

from minirag.core.domain.entities import Embedding
from minirag.core.errors import EmbedderInitError, EmbedderResult
from minirag.core.ports import EmbedderPort, WordVectorPort
from minirag.utils import tokenize

__all__ = ["AveragingEmbedder", "load_embedder"]

logger = logging.getLogger(__name__)


class AveragingEmbedder(EmbedderPort):
    """Embed text as the component-wise mean of its token vectors.

    Tokens missing from the table are dropped. When no token survives the
    lookup (empty text, all out-of-vocabulary) the result is an empty vector,
    which downstream ranking treats as "no signal".
    """

    def __init__(self, table: WordVectorPort):
        self.table = table

    @property
    def dim(self) -> int:
        return self.table.dim

    def embed(self, text: str) -> Embedding:
        vectors: List[Embedding] = []
        for token in tokenize(text):
            vector = self.table.lookup(token)
            if vector is not None:
                vectors.append(vector)

        if not vectors:
            logger.debug(f"No token of {text[:50]!r} found in the embedding table")
            return []

        return np.mean(np.asarray(vectors, dtype=np.float64), axis=0).tolist()


def load_embedder(loader: Callable[[], WordVectorPort]) -> EmbedderResult:
    """Build the word-vector table once and wrap it into an embedder.

    Load failures come back as a failed `EmbedderResult`; the caller
    decides whether that is fatal.
    """
    try:
        table = loader()
    except EmbedderInitError as err:
        logger.error(f"Embedding table could not be loaded: {err}")
        return EmbedderResult.failure(err)

    logger.info(f"Embedding table loaded: {type(table).__name__} (dim={table.dim})")
    return EmbedderResult.success(AveragingEmbedder(table))
