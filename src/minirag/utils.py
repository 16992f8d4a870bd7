"""
Utils: light helpers - no external deps
"""

from typing import List, Sequence

from minirag.core.domain.entities import Document

__all__ = ["tokenize", "build_context"]


def tokenize(text: str) -> List[str]:
    """
    Split text on whitespace/newlines. Tokens are kept verbatim:
    no lowercasing, stemming or punctuation stripping.
    """
    return text.split()


def build_context(documents: Sequence[Document]) -> str:
    """Space-join document contents, keeping the ranked order."""
    return " ".join(doc.content for doc in documents)
