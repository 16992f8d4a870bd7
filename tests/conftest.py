# tests/conftest.py
import logging

import pytest

from minirag.core.services.embedding import AveragingEmbedder
from minirag.core.services.retrieval import RetrievalService
from minirag.infrastructure.embeddings.keyed_vectors import KeyedVectorTable

logging.basicConfig(level=logging.INFO)  # Basic config for test logs


# Small hand-made vocabulary (dim=3). Axis 0 ~ "languages/apps",
# axis 1 ~ "data", axis 2 ~ "misc". Tokens are case-sensitive and
# "apps?" keeps its punctuation on purpose.
VOCAB = {
    "language": [1.0, 0.0, 0.0],
    "programming": [0.9, 0.1, 0.0],
    "Swift": [0.8, 0.0, 0.2],
    "apps?": [0.9, 0.0, 0.1],
    "Python": [0.1, 0.9, 0.0],
    "data": [0.0, 1.0, 0.0],
    "science": [0.0, 0.9, 0.1],
    "great": [0.0, 0.5, 0.5],
    "good": [0.0, 0.5, 0.5],
    "zero": [0.0, 0.0, 0.0],
}


@pytest.fixture
def word_table() -> KeyedVectorTable:
    return KeyedVectorTable(VOCAB)


@pytest.fixture
def embedder(word_table) -> AveragingEmbedder:
    return AveragingEmbedder(word_table)


@pytest.fixture
def retrieval_service(embedder) -> RetrievalService:
    return RetrievalService(embedder)
