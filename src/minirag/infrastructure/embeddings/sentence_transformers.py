"""
File: src/minirag/infrastructure/embeddings/sentence_transformers.py
SentenceTransformer token vectors (CPU-friendly).
"""

from typing import List

from sentence_transformers import SentenceTransformer

from minirag.core.errors import EmbedderInitError
from minirag.core.ports import WordVectorPort


class SentenceTransformerTokenVectors(WordVectorPort):
    """Encode each token on its own. Every token is in vocabulary."""

    def __init__(self, model_name: str = "all-MiniLM-L6-v2"):
        try:
            self.model = SentenceTransformer(model_name)
        except Exception as err:
            raise EmbedderInitError(
                f"Could not load SentenceTransformer model '{model_name}': {err}"
            ) from err
        self.dim = self.model.get_sentence_embedding_dimension()

    def lookup(self, token: str) -> List[float]:
        return self.model.encode([token])[0].tolist()
