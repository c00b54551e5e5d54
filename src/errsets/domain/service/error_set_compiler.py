"""Domain service: Error Set Compilation.

Compiling a definition produces a StructuredError subclass named after
the set.  Calling the subclass with a message key (and template params)
resolves the message and builds the error, so ``except ServerError``
and ``except StructuredError`` both catch what it produces.
"""

from __future__ import annotations

from typing import Any

from errsets.domain.exceptions import InvalidArgumentError
from errsets.domain.model.catalog import ErrorSetDefinition
from errsets.domain.model.structured_error import StructuredError
from errsets.domain.service.message_resolver import resolve


def compile_error_set(
    definition: ErrorSetDefinition,
    *,
    strict: bool = False,
) -> type[StructuredError]:
    """Build the error class for *definition*."""

    def __init__(self: StructuredError, key: str, params: Any = None) -> None:
        outcome = resolve(definition.catalog, key, params, strict=strict)
        if not outcome.valid:
            raise InvalidArgumentError(outcome.reason) from outcome.cause
        StructuredError.__init__(self, definition.name, outcome.message)
        # args mirror this constructor's signature.
        self.args = (key,) if params is None else (key, params)
        self.key = key

    return type(
        definition.name,
        (StructuredError,),
        {
            "__init__": __init__,
            "__doc__": f"Error set {definition.name!r} ({len(definition.catalog)} messages).",
            "definition": definition,
            "set_name": definition.name,
            "catalog": definition.catalog,
            "strict": strict,
        },
    )
