# src/minirag/core/services/retrieval.py

import dataclasses
import logging
from typing import Optional, Sequence, Tuple

from minirag.core.domain.entities import Document
from minirag.core.ports import (
    DocumentStorePort,
    EmbedderPort,
    RankerPort,
    RetrieverPort,
)
from minirag.core.services.ranking import CosineRanker
from minirag.infrastructure.persistence.memory.store import InMemoryDocumentStore

logger = logging.getLogger(__name__)


class RetrievalService(RetrieverPort):
    """
    Orchestrates embedder + store + ranker:
      1) add_document: embed content, attach vector, append to store
      2) retrieve: embed query, rank the current store snapshot
    Nothing is cached between calls; the store may grow in between.
    """

    def __init__(
        self,
        embedder: EmbedderPort,
        store: Optional[DocumentStorePort] = None,
        ranker: Optional[RankerPort] = None,
    ):
        self.embedder = embedder
        self.store = store if store is not None else InMemoryDocumentStore()
        self.ranker = ranker if ranker is not None else CosineRanker()
        logger.info(
            f"RetrievalService initialized with embedder: {type(self.embedder).__name__}, "
            f"store: {type(self.store).__name__} and ranker: {type(self.ranker).__name__}"
        )

    def add_document(self, document: Document) -> None:
        # Vector is attached before the append: stored documents always carry one.
        embedding = list(self.embedder.embed(document.content))
        if not embedding:
            logger.warning(
                f"Document {document.id!r} has no known tokens; stored with an empty embedding"
            )
        self.store.append(dataclasses.replace(document, embedding=embedding))
        logger.info(f"Added document {document.id!r} (dim={len(embedding)})")

    def retrieve(
        self, query: str, limit: int = 3
    ) -> Tuple[Sequence[Document], Sequence[float]]:
        logger.info(f"Retrieving for query: '{query}' with limit={limit}")
        query_vector = self.embedder.embed(query)
        docs, scores = self.ranker.rank(query_vector, self.store.all(), limit)
        logger.debug(f"Retrieved doc_ids: {[d.id for d in docs]} with scores: {scores}")
        return docs, scores

    def document_count(self) -> int:
        return len(self.store.all())
