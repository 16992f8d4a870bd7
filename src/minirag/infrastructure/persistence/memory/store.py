# src/minirag/infrastructure/persistence/memory/store.py

import threading
from typing import List, Sequence, Tuple

from minirag.core.domain.entities import Document
from minirag.core.ports import DocumentStorePort


class InMemoryDocumentStore(DocumentStorePort):
    """
    Append-only document list. No dedup by id, no removal, no update.
    Readers get an immutable snapshot taken under the same lock as appends.
    """

    def __init__(self):
        self._documents: List[Document] = []
        self._lock = threading.Lock()

    def append(self, document: Document) -> None:
        with self._lock:
            self._documents.append(document)

    def all(self) -> Sequence[Document]:
        with self._lock:
            snapshot: Tuple[Document, ...] = tuple(self._documents)
        return snapshot

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
