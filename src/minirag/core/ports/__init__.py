from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable

from minirag.core.domain.entities import Document, Embedding


# -------- Ports --------
@runtime_checkable
class WordVectorPort(Protocol):
    dim: int

    def lookup(self, token: str) -> Optional[Embedding]: ...


@runtime_checkable
class EmbedderPort(Protocol):
    def embed(self, text: str) -> Embedding: ...


@runtime_checkable
class DocumentStorePort(Protocol):
    def append(self, document: Document) -> None: ...
    def all(self) -> Sequence[Document]: ...


@runtime_checkable
class RankerPort(Protocol):
    def rank(
        self, query_vector: Embedding, documents: Sequence[Document], limit: int = 3
    ) -> Tuple[Sequence[Document], Sequence[float]]: ...


@runtime_checkable
class RetrieverPort(Protocol):
    def retrieve(
        self, query: str, limit: int = 3
    ) -> Tuple[Sequence[Document], Sequence[float]]: ...


@runtime_checkable
class GeneratorPort(Protocol):
    def generate(self, question: str, context: str) -> str: ...
