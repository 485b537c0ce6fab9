"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult.
Optional errors never escape a service; they become ``ok=False`` results
carrying one of the codes in :data:`ERROR_CODES`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from optionkit.domain.errors import InvalidArgumentError, NoSuchElementError, OptionalError

ERROR_CODES: dict[type[OptionalError], str] = {
    InvalidArgumentError: "INVALID_ARGUMENT",
    NoSuchElementError: "NO_SUCH_ELEMENT",
}


def error_code_for(exc: OptionalError) -> str:
    """Map an Optional error to its service error code (most specific class wins)."""
    for cls in type(exc).__mro__:
        code = ERROR_CODES.get(cls)
        if code is not None:
            return code
    return "OPTIONAL_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"probe"``, ``"examples"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: OptionalError, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result from an Optional error."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=error_code_for(exc), message=exc.message, detail=detail),
        )
