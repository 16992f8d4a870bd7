# scripts/demo.py

"""
Demo: index three short documents about Swift and ask a question.

Usage:
    python scripts/demo.py path/to/glove.6B.50d.txt
"""

import logging
import sys

from fastapi import HTTPException

from minirag.core.domain.entities import Document
from minirag.core.services.embedding import load_embedder
from minirag.core.services.rag import RagService
from minirag.core.services.retrieval import RetrievalService
from minirag.infrastructure.embeddings.keyed_vectors import KeyedVectorTable
from minirag.infrastructure.llms.ollama_chat import OllamaGenerator
from minirag.settings import settings

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

DOCUMENTS = [
    Document(
        id="1",
        content="Swift is a programming language developed by Apple for iOS, macOS, watchOS, and tvOS.",
    ),
    Document(
        id="2",
        content="Swift was designed to be safer and more concise than Objective-C, with modern features.",
    ),
    Document(
        id="3",
        content="Key features of Swift include type safety, type inference, and automatic memory management.",
    ),
]

QUESTION = "What is Swift and what are its main characteristics?"


def main() -> int:
    vectors_path = sys.argv[1] if len(sys.argv) > 1 else settings.word_vectors_path

    result = load_embedder(lambda: KeyedVectorTable.from_text_file(vectors_path))
    if not result.ok:
        logger.error(f"Cannot start demo: {result.error}")
        return 1

    retrieval = RetrievalService(result.unwrap())
    for doc in DOCUMENTS:
        retrieval.add_document(doc)

    rag = RagService(retrieval, OllamaGenerator(timeout=settings.ollama_request_timeout))
    try:
        response = rag.ask(QUESTION)
    except HTTPException as err:
        logger.error(f"Generation failed ({err.status_code}): {err.detail}")
        return 1

    print(f"Question: {QUESTION}")
    print(f"Answer: {response['answer']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
