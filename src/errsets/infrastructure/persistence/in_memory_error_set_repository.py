"""In-process implementation of ErrorSetRepository."""

from __future__ import annotations

import threading

from errsets.domain.repository.error_set_repository import (
    ErrorSetModel,
    ErrorSetRepository,
)


class InMemoryErrorSetRepository(ErrorSetRepository):
    """Dict-backed store.  Writes are serialized; reads take no lock."""

    def __init__(self) -> None:
        self._store: dict[str, ErrorSetModel] = {}
        self._lock = threading.Lock()

    # --- ErrorSetRepository interface -----------------------------------------

    def get(self, name: str) -> ErrorSetModel | None:
        return self._store.get(name)

    def exists(self, name: str) -> bool:
        return name in self._store

    def add(self, name: str, model: ErrorSetModel) -> bool:
        with self._lock:
            if name in self._store:
                return False
            self._store[name] = model
            return True

    def save(self, name: str, model: ErrorSetModel) -> None:
        with self._lock:
            self._store[name] = model

    def list_all(self) -> dict[str, ErrorSetModel]:
        return dict(self._store)
