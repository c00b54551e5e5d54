"""The structured error value every error set produces.

A StructuredError is an ordinary exception with a stable ``name``, a
deterministic ``message`` and any number of extra details attached
after construction.
"""

from __future__ import annotations

import logging
import os
import traceback
from pathlib import Path
from typing import Any

from errsets.domain.exceptions import InvalidArgumentError
from errsets.domain.predicates import is_function, is_object, is_string

# Keys that never reach an instance through add_details().
RESERVED_KEYS = frozenset({"__proto__", "prototype", "constructor"})

# Attributes BaseException or this class manage themselves.
_OWNED_ATTRIBUTES = frozenset({"args", "_details"})

_PACKAGE_ROOT = f"{Path(__file__).parents[2]}{os.sep}"

logger = logging.getLogger(__name__)


def _capture_origin() -> traceback.StackSummary | None:
    """Return the call stack outside this package, or None if unavailable."""
    try:
        # Plain tuples keep the summary picklable.
        frames = [
            (frame.filename, frame.lineno, frame.name, frame.line)
            for frame in traceback.extract_stack()
            if not frame.filename.startswith(_PACKAGE_ROOT)
        ]
    except (AttributeError, ValueError):
        return None
    return traceback.StackSummary.from_list(frames)


class StructuredError(Exception):
    """A named, message-bearing error with extensible details.

    ``key`` is only set on instances built by a compiled error set.
    """

    key: str | None = None

    def __init__(self, name: str, message: str) -> None:
        if not is_string(name):
            raise InvalidArgumentError("The 'name' value must be of type 'str'")
        if not is_string(message):
            raise InvalidArgumentError("The 'message' value must be of type 'str'")
        super().__init__(name, message)
        self.name = name
        self.message = message
        self.origin = _capture_origin()
        self._details: dict[str, Any] = {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, message={self.message!r})"

    def add_details(self, details: Any) -> StructuredError:
        """Merge *details* onto the instance and return it.

        Reserved keys, dunder names, ``args`` and names of the error's
        methods are dropped.  Everything else overwrites same-named attributes,
        ``name`` and ``message`` included.
        """
        if not is_object(details):
            raise InvalidArgumentError("The 'details' value must be a mapping")
        for key in details:
            if not is_string(key):
                raise InvalidArgumentError(
                    f"The 'details' keys must be of type 'str', got {type(key).__name__}"
                )

        accepted = {
            key: value for key, value in details.items()
            if not self._is_reserved(key)
        }
        dropped = [key for key in details if key not in accepted]
        if dropped:
            logger.debug("Dropped reserved detail keys %r from %r", dropped, self.name)
        for key, value in accepted.items():
            setattr(self, key, value)
        self._details.update(accepted)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return name, message and every merged detail."""
        return {"name": self.name, "message": self.message, **self._details}

    def _is_reserved(self, key: str) -> bool:
        if key in RESERVED_KEYS or key in _OWNED_ATTRIBUTES:
            return True
        if key.startswith("__") and key.endswith("__"):
            return True
        return is_function(getattr(type(self), key, None))
