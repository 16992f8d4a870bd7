"""
File: src/minirag/core/errors.py
Construction-time failures of the embedding layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from minirag.core.services.embedding import AveragingEmbedder

__all__ = ["EmbedderInitError", "EmbedderResult"]


class EmbedderInitError(RuntimeError):
    """The underlying embedding table could not be loaded."""


@dataclass(frozen=True)
class EmbedderResult:
    """Outcome of building an embedder: either `embedder` or `error` is set."""

    embedder: Optional["AveragingEmbedder"] = None
    error: Optional[EmbedderInitError] = None

    @classmethod
    def success(cls, embedder: "AveragingEmbedder") -> "EmbedderResult":
        return cls(embedder=embedder)

    @classmethod
    def failure(cls, error: EmbedderInitError) -> "EmbedderResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "AveragingEmbedder":
        if self.error is not None:
            raise self.error
        assert self.embedder is not None
        return self.embedder
