"""Domain service: Message Resolution.

Turns a catalog key plus optional parameters into a message string.
Resolution never raises; every failure is reported through the
returned ResolutionOutcome so the caller decides how to surface it.

Order of checks (first match wins):
  1. unknown key    : default message (or a failure in strict mode)
  2. literal message: returned verbatim
  3. template       : params must be a list or tuple
  4. template call  : must not raise and must return a str
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from errsets.domain.model.catalog import MessageCatalog
from errsets.domain.predicates import is_array, is_string

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Warning: This is a default message, check the message key."


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of one resolution attempt."""

    message: str | None
    valid: bool
    reason: str | None = None
    cause: BaseException | None = None

    @staticmethod
    def ok(message: str) -> ResolutionOutcome:
        return ResolutionOutcome(message=message, valid=True)

    @staticmethod
    def failed(reason: str, cause: BaseException | None = None) -> ResolutionOutcome:
        return ResolutionOutcome(message=None, valid=False, reason=reason, cause=cause)


def resolve(
    catalog: MessageCatalog,
    key: Any,
    params: Any = None,
    *,
    strict: bool = False,
) -> ResolutionOutcome:
    """Resolve *key* against *catalog*, calling templates with *params*."""
    if key not in catalog:
        if strict:
            return ResolutionOutcome.failed(f"Unknown message key: {key!r}")
        logger.warning("Unknown message key %r, using the default message", key)
        return ResolutionOutcome.ok(DEFAULT_MESSAGE)

    entry = catalog[key]
    if is_string(entry):
        return ResolutionOutcome.ok(entry)

    if not is_array(params):
        return ResolutionOutcome.failed(
            "params are required and must be a list or tuple "
            f"when message {key!r} is a template"
        )

    try:
        message = entry(*params)
    except Exception as exc:
        return ResolutionOutcome.failed(
            f"Template for message {key!r} raised {type(exc).__name__}: {exc}",
            cause=exc,
        )

    if not is_string(message):
        return ResolutionOutcome.failed(
            f"The template for message {key!r} must return a 'str', "
            f"got {type(message).__name__}"
        )
    return ResolutionOutcome.ok(message)
