"""optionkit — an explicit container for values that may be absent."""

from optionkit.domain.errors import (
    InvalidArgumentError,
    NoSuchElementError,
    OptionalError,
)
from optionkit.domain.optional import Optional

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "NoSuchElementError",
    "Optional",
    "OptionalError",
    "__version__",
]
