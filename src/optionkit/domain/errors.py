"""Error taxonomy for Optional operations.

Two error kinds share one base so callers can catch broadly or narrowly::

    OptionalError
     ├── InvalidArgumentError   (also a ValueError)
     └── NoSuchElementError     (also a LookupError)
"""

from __future__ import annotations


class OptionalError(Exception):
    """Base class for all errors raised by the Optional container."""

    default_message = "Optional operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class InvalidArgumentError(OptionalError, ValueError):
    """Raised when asked to wrap ``None`` as a present value."""

    default_message = "Value can't be None"


class NoSuchElementError(OptionalError, LookupError):
    """Raised by ``get()`` on an empty Optional."""

    default_message = "There is no value set for this optional"
