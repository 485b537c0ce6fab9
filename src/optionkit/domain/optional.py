"""Optional — a container object which may or may not hold a non-None value.

An Optional is either *present* (holds exactly one non-None value) or
*empty*. The state is fixed at construction through one of the factory
classmethods and never changes afterwards.

INVARIANT: A present Optional never holds ``None``.
INVARIANT: Caller-supplied callables run synchronously, at most once, and
their exceptions propagate unmodified.

Usage::

    Optional.of("hello").filter(lambda s: len(s) == 5).get()  # "hello"
    Optional.empty().or_else("default")                       # "default"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from optionkit.domain.errors import InvalidArgumentError, NoSuchElementError

T = TypeVar("T")


@dataclass(frozen=True, eq=False, slots=True)
class Optional(Generic[T]):
    """Immutable holder for a value that may be absent.

    Construct through :meth:`of`, :meth:`empty`, or :meth:`of_nullable`.
    Comparison is by identity; two Optionals are independent instances.
    """

    _present: bool
    _value: Any = None  # meaningful only when _present

    def __post_init__(self) -> None:
        if self._present and self._value is None:
            raise InvalidArgumentError()
        if not self._present and self._value is not None:
            raise InvalidArgumentError("An empty Optional can't hold a value")

    def __repr__(self) -> str:
        if self._present:
            return f"Optional.of({self._value!r})"
        return "Optional.empty()"

    # --- Construction ---

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Return a present Optional holding *value*.

        Raises:
            InvalidArgumentError: If *value* is ``None``.
        """
        if value is None:
            raise InvalidArgumentError()
        return cls(True, value)

    @classmethod
    def empty(cls) -> Optional[T]:
        """Return an empty Optional."""
        return cls(False)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Return ``of(value)`` if *value* is not ``None``, otherwise ``empty()``."""
        return cls.empty() if value is None else cls.of(value)

    # --- Inspection ---

    def is_present(self) -> bool:
        """Return True if a value is held."""
        return self._present

    def get(self) -> T:
        """Return the held value.

        Raises:
            NoSuchElementError: If this Optional is empty.
        """
        if not self._present:
            raise NoSuchElementError()
        return self._value

    # --- Transformation ---

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return this Optional if present and *predicate* accepts the value.

        Otherwise return an empty Optional. The predicate is not called
        when this Optional is already empty.
        """
        if self._present and predicate(self._value):
            return self
        return self.empty()

    # --- Consumption ---

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        """Call *consumer* with the value if present, otherwise do nothing."""
        if self._present:
            consumer(self._value)

    # --- Defaulting ---

    def or_else(self, other: T) -> T:
        """Return the value if present, otherwise *other*."""
        return self._value if self._present else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value if present, otherwise the result of ``supplier()``.

        *supplier* is only called when this Optional is empty.
        """
        return self._value if self._present else supplier()

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        """Return the value if present, otherwise raise ``error_supplier()``.

        The exception built by *error_supplier* is raised as-is.
        """
        if self._present:
            return self._value
        raise error_supplier()
