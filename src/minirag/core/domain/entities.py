from dataclasses import dataclass
from typing import Optional, Sequence

Embedding = Sequence[float]


@dataclass(frozen=True)
class Document:
    id: str
    content: str
    embedding: Optional[Embedding] = None
