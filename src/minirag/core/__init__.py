"""
File: src/minirag/core/__init__.py
Core module with the retrieval logic.
"""

from .ports import EmbedderPort, GeneratorPort, RetrieverPort

__all__ = ["EmbedderPort", "GeneratorPort", "RetrieverPort"]
