# src/minirag/core/services/rag.py

import logging
from typing import Any, Mapping

from minirag.core.ports import GeneratorPort, RetrieverPort
from minirag.utils import build_context

logger = logging.getLogger(__name__)

NO_DOCUMENTS_ANSWER = "No documents are indexed yet. Please add documents first."
NO_CONTEXT_REQUESTED_ANSWER = "No documents were requested (k=0), so there is no context to answer from."


class RagService:
    def __init__(self, retriever: RetrieverPort, generator: GeneratorPort):
        self.retriever = retriever
        self.generator = generator
        logger.info(
            f"RagService initialized with retriever: {type(retriever).__name__} "
            f"and generator: {type(generator).__name__}"
        )

    def ask(self, question: str, top_k: int = 3) -> Mapping[str, Any]:
        if top_k <= 0:
            logger.info(f"top_k={top_k}, skipping retrieval and generation.")
            return {"answer": NO_CONTEXT_REQUESTED_ANSWER, "docs": [], "scores": []}

        docs, scores = self.retriever.retrieve(question, top_k)
        if not docs:
            # with top_k > 0 an empty result means an empty store
            logger.info("No documents retrieved, skipping generation.")
            return {"answer": NO_DOCUMENTS_ANSWER, "docs": [], "scores": []}

        # Generator errors propagate unchanged: no retry, no fallback.
        answer = self.generator.generate(question, build_context(docs))
        logger.info(f"Generated answer for question '{question}': '{answer[:100]}...'")
        return {"answer": answer, "docs": docs, "scores": scores}
