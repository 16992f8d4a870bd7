from .entities import Document, Embedding

__all__ = ["Document", "Embedding"]
