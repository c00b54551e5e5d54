"""Application service: the Error Set Registry.

Validates catalogs, compiles them into error classes and keeps one
class per set name.  Names are unique unless the registry was built
with ``RegistryOptions(overwrite=True)``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from errsets.domain.exceptions import DuplicateDefinitionError, InvalidArgumentError
from errsets.domain.model.catalog import ErrorSetDefinition, MessageCatalog
from errsets.domain.model.structured_error import StructuredError
from errsets.domain.predicates import is_string
from errsets.domain.repository.error_set_repository import (
    ErrorSetModel,
    ErrorSetRepository,
)
from errsets.domain.service.error_set_compiler import compile_error_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryOptions:
    """Registry configuration.

    overwrite: replace an existing set instead of raising
        DuplicateDefinitionError.
    strict: compiled sets fail on unknown message keys instead of
        falling back to the default message.
    """

    overwrite: bool = False
    strict: bool = False


class ErrorSetRegistry:

    # Shared class for building one-off errors without a set.
    StructuredError = StructuredError

    def __init__(
        self,
        repository: ErrorSetRepository,
        options: RegistryOptions | None = None,
    ) -> None:
        self._repository = repository
        self._options = options if options is not None else RegistryOptions()

    @property
    def options(self) -> RegistryOptions:
        return self._options

    @property
    def models(self) -> Mapping[str, ErrorSetModel]:
        """Read-only snapshot of every registered set."""
        return MappingProxyType(self._repository.list_all())

    def register(self, name: Any, catalog: Any) -> ErrorSetModel:
        """Validate, compile and store an error set; return its class."""
        model = self.compile(name, catalog, strict=self._options.strict)

        if self._options.overwrite:
            if self._repository.exists(name):
                logger.warning("Replacing error set %r", name)
            self._repository.save(name, model)
        elif not self._repository.add(name, model):
            raise DuplicateDefinitionError(
                f"Cannot overwrite the error set: {name}"
            )

        logger.debug("Registered error set %r with %d messages", name, len(model.catalog))
        return model

    @staticmethod
    def compile(name: Any, catalog: Any, *, strict: bool = False) -> ErrorSetModel:
        """Validate and compile without registering."""
        if not is_string(name):
            raise InvalidArgumentError("The 'name' value must be of type 'str'")
        definition = ErrorSetDefinition(name=name, catalog=MessageCatalog.of(catalog))
        return compile_error_set(definition, strict=strict)

    def get(self, name: str) -> ErrorSetModel | None:
        return self._repository.get(name)

    def names(self) -> list[str]:
        return list(self._repository.list_all())

    def __contains__(self, name: object) -> bool:
        return is_string(name) and self._repository.exists(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._repository.list_all())
