"""
Pretrained word vectors held in memory (GloVe / word2vec text format).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

import numpy as np

from minirag.core.errors import EmbedderInitError
from minirag.core.ports import WordVectorPort

__all__ = ["KeyedVectorTable"]

logger = logging.getLogger(__name__)


class KeyedVectorTable(WordVectorPort):
    """Token -> vector lookup. Tokens are matched verbatim (case-sensitive).

    The table is frozen after construction, so it can be shared by
    concurrent `embed` calls without locking.
    """

    dim: int

    def __init__(self, vectors: Mapping[str, Sequence[float]]):
        if not vectors:
            raise EmbedderInitError("Word-vector table is empty")

        self._vectors: Dict[str, np.ndarray] = {}
        dim: Optional[int] = None
        for token, values in vectors.items():
            try:
                arr = np.asarray(values, dtype=np.float64)
            except (TypeError, ValueError) as err:
                raise EmbedderInitError(f"Invalid vector for token {token!r}: {err}") from err
            if arr.ndim != 1 or arr.size == 0:
                raise EmbedderInitError(f"Invalid vector for token {token!r}")
            if not np.isfinite(arr).all():
                raise EmbedderInitError(f"Non-finite value in vector for token {token!r}")
            if dim is None:
                dim = arr.size
            elif arr.size != dim:
                raise EmbedderInitError(
                    f"Dimension mismatch for token {token!r}: expected {dim}, got {arr.size}"
                )
            arr.setflags(write=False)
            self._vectors[token] = arr

        self.dim = int(dim)

    @classmethod
    def from_text_file(cls, path: str | Path) -> "KeyedVectorTable":
        """Load `token v1 ... vD` lines. A leading `count dim` header is skipped."""
        path = Path(path)
        if not path.is_file():
            raise EmbedderInitError(f"Word vectors file not found: {path}")

        vectors: Dict[str, list[float]] = {}
        try:
            with path.open(encoding="utf-8") as fh:
                for line_no, line in enumerate(fh, 1):
                    parts = line.split()
                    if not parts:
                        continue
                    if line_no == 1 and len(parts) == 2 and all(p.isdigit() for p in parts):
                        continue  # word2vec header
                    if len(parts) < 2:
                        raise EmbedderInitError(f"{path}:{line_no}: missing vector values")
                    try:
                        vectors[parts[0]] = [float(v) for v in parts[1:]]
                    except ValueError as err:
                        raise EmbedderInitError(f"{path}:{line_no}: {err}") from err
        except (OSError, UnicodeDecodeError) as err:
            raise EmbedderInitError(f"Could not read word vectors from {path}: {err}") from err

        table = cls(vectors)
        logger.info(f"Loaded {len(table)} word vectors (dim={table.dim}) from {path}")
        return table

    def lookup(self, token: str) -> Optional[np.ndarray]:
        return self._vectors.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)
