"""Message catalogs and error-set definitions.

A catalog is validated once, when the set is defined, and copied into a
read-only mapping.  Nothing mutates it afterwards, so a compiled error
set always resolves messages against exactly what was registered.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from errsets.domain.exceptions import InvalidArgumentError
from errsets.domain.predicates import (
    is_empty_object,
    is_object,
    is_object_of,
    is_string,
)

Template = Callable[..., str]
Message = Union[str, Template]

MESSAGE_KINDS = ("string", "function")


@dataclass(frozen=True)
class MessageCatalog:
    """Immutable mapping of message keys to literal messages or templates."""

    entries: Mapping[str, Message]

    def __post_init__(self) -> None:
        if not is_object(self.entries):
            raise InvalidArgumentError("The 'catalog' value must be a mapping")
        if is_empty_object(self.entries):
            raise InvalidArgumentError("The 'catalog' value must not be an empty mapping")
        if not all(is_string(key) for key in self.entries):
            raise InvalidArgumentError("The 'catalog' keys must be of type 'str'")
        if not is_object_of(self.entries, MESSAGE_KINDS):
            raise InvalidArgumentError(
                "The 'catalog' values must be of type 'str' or a callable template"
            )
        # Detach from the caller's mapping.
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, key: object) -> bool:
        return is_string(key) and key in self.entries

    def __getitem__(self, key: str) -> Message:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        return list(self.entries)

    @staticmethod
    def of(catalog: Any) -> MessageCatalog:
        """Accept an existing catalog as-is, otherwise validate a mapping."""
        if isinstance(catalog, MessageCatalog):
            return catalog
        return MessageCatalog(catalog)


@dataclass(frozen=True)
class ErrorSetDefinition:
    """A named catalog: everything needed to compile one error set."""

    name: str
    catalog: MessageCatalog

    def __post_init__(self) -> None:
        if not is_string(self.name):
            raise InvalidArgumentError("The 'name' value must be of type 'str'")
        if "\x00" in self.name:
            raise InvalidArgumentError("The 'name' value must not contain null characters")
        if not isinstance(self.catalog, MessageCatalog):
            raise InvalidArgumentError("The 'catalog' value must be a MessageCatalog")
