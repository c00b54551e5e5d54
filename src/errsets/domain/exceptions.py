"""Domain-level exceptions.

Everything the library raises is a subclass of ErrorSetsException so
callers can catch library failures uniformly, apart from the structured
errors the library builds for them.
"""


class ErrorSetsException(Exception):
    """Base class for all library errors."""


class InvalidArgumentError(ErrorSetsException, TypeError):
    """An input failed a type or shape precondition."""


class DuplicateDefinitionError(ErrorSetsException):
    """An error set with the same name is already registered."""
