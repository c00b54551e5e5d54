"""Composition root: wires the registry to its repository.

``default_registry`` is built once, at import time, and shared by
reference.  Code that needs isolation (tests, plugins) should build its
own with ``error_set_registry()``.
"""

from __future__ import annotations

from typing import Any

from errsets.application.error_set_registry import ErrorSetRegistry, RegistryOptions
from errsets.domain.model.structured_error import StructuredError
from errsets.domain.repository.error_set_repository import ErrorSetModel
from errsets.infrastructure.persistence.in_memory_error_set_repository import (
    InMemoryErrorSetRepository,
)

__all__ = [
    "StructuredError",
    "create_set",
    "default_registry",
    "error_set_registry",
]


def error_set_registry(options: RegistryOptions | None = None) -> ErrorSetRegistry:
    return ErrorSetRegistry(InMemoryErrorSetRepository(), options)


default_registry = error_set_registry()


def create_set(name: Any, catalog: Any) -> ErrorSetModel:
    """Register an error set on the default registry."""
    return default_registry.register(name, catalog)
