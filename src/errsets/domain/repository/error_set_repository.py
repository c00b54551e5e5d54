"""Abstract repository for compiled error sets.

Defined in the domain layer so the registry never depends on how the
sets are stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from errsets.domain.model.structured_error import StructuredError

ErrorSetModel = type[StructuredError]


class ErrorSetRepository(ABC):

    @abstractmethod
    def get(self, name: str) -> ErrorSetModel | None:
        """Return the error set registered under *name*, or None."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True if *name* is registered."""

    @abstractmethod
    def add(self, name: str, model: ErrorSetModel) -> bool:
        """Store *model* only if *name* is free; return whether it was stored.

        The check and the insert must be atomic.
        """

    @abstractmethod
    def save(self, name: str, model: ErrorSetModel) -> None:
        """Store *model* under *name*, replacing any existing entry."""

    @abstractmethod
    def list_all(self) -> dict[str, ErrorSetModel]:
        """Return a snapshot of every registered set."""
