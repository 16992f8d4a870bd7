"""
File: src/minirag/infrastructure/embeddings/__init__.py
Word-vector tables backing the averaging embedder.
"""

from .keyed_vectors import KeyedVectorTable
from .sentence_transformers import SentenceTransformerTokenVectors

__all__ = ["KeyedVectorTable", "SentenceTransformerTokenVectors"]
