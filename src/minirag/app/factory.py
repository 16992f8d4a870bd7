# src/minirag/app/factory.py

"""
Service construction for the app and scripts.
- Every call builds new instances; the caller owns them.
- The FastAPI lifespan keeps its pair on `app.state`.
"""

import json
import logging
from functools import partial
from pathlib import Path
from typing import List, Tuple

from minirag.core.domain.entities import Document
from minirag.core.services.embedding import AveragingEmbedder, load_embedder
from minirag.core.services.rag import RagService
from minirag.core.services.retrieval import RetrievalService
from minirag.infrastructure.embeddings.keyed_vectors import KeyedVectorTable
from minirag.infrastructure.embeddings.sentence_transformers import (
    SentenceTransformerTokenVectors,
)
from minirag.infrastructure.llms.ollama_chat import OllamaGenerator
from minirag.infrastructure.llms.openai_chat import OpenAIGenerator
from minirag.settings import settings

logger = logging.getLogger(__name__)


def get_generator():
    if settings.ollama_enabled:
        logger.info(f"Using OllamaGenerator (model: {settings.ollama_model})")
        return OllamaGenerator()
    elif settings.openai_api_key:
        logger.info(f"Using OpenAIGenerator (model: {settings.openai_model})")
        return OpenAIGenerator()
    else:
        logger.error("No LLM generator configured")
        raise RuntimeError("No LLM generator configured")


def get_embedder() -> AveragingEmbedder:
    if settings.embedding_backend == "word_vectors":
        loader = partial(KeyedVectorTable.from_text_file, settings.word_vectors_path)
    elif settings.embedding_backend == "sentence_transformers":
        loader = partial(SentenceTransformerTokenVectors, settings.st_embedding_model)
    else:
        logger.error(f"Unsupported embedding_backend: {settings.embedding_backend}")
        raise ValueError(f"Unsupported embedding_backend: {settings.embedding_backend}")

    result = load_embedder(loader)
    if not result.ok:
        raise RuntimeError(f"Embedder unavailable: {result.error}") from result.error
    return result.unwrap()


def load_seed_documents(path: str | Path) -> List[Document]:
    """Read a JSON list of `{"id": ..., "content": ...}` objects."""
    with Path(path).open(encoding="utf-8") as fh:
        raw = json.load(fh)
    return [Document(id=str(item["id"]), content=item["content"]) for item in raw]


def build_services() -> Tuple[RetrievalService, RagService]:
    retrieval = RetrievalService(get_embedder())

    if settings.seed_documents_path:
        seed = load_seed_documents(settings.seed_documents_path)
        for doc in seed:
            retrieval.add_document(doc)
        logger.info(f"Seeded {len(seed)} documents from {settings.seed_documents_path}")

    rag = RagService(retrieval, get_generator())
    return retrieval, rag
