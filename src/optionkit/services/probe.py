"""ProbeService — run a value through the Optional container.

Translates plain inputs (typically CLI arguments) into Optional calls and
reports what the container did with them:

    construct (of / of_nullable) -> filter* -> resolve (or_else / or_else_get / or_else_throw)
"""

from __future__ import annotations

import logging
from typing import Any

from optionkit.domain.errors import NoSuchElementError, OptionalError
from optionkit.domain.optional import Optional
from optionkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ProbeService:
    """Drive :class:`Optional` from plain string inputs.

    Args:
        fallback: Value returned for an empty result when the caller gives
            no explicit default. Supplied lazily through ``or_else_get``.
    """

    def __init__(self, *, fallback: str | None = None) -> None:
        self._fallback = fallback

    def probe(
        self,
        value: str | None,
        *,
        nullable: bool = True,
        min_length: int | None = None,
        contains: str | None = None,
        default: str | None = None,
        require: bool = False,
    ) -> ServiceResult:
        """Wrap *value*, apply the requested filters, and resolve the result.

        ``require`` takes precedence over ``default``, which takes
        precedence over the configured fallback.
        """
        op = "probe"
        warnings: list[str] = []

        try:
            opt = Optional.of_nullable(value) if nullable else Optional.of(value)
        except OptionalError as exc:
            logger.debug("Rejected input %r", value)
            return ServiceResult.failure(op, exc, strict=not nullable)

        opt.if_present(lambda held: logger.debug("Wrapped %r", held))
        had_input = opt.is_present()

        filters: list[str] = []
        if min_length is not None:
            filters.append(f"min_length={min_length}")
            opt = opt.filter(lambda s: len(s) >= min_length)
        if contains is not None:
            filters.append(f"contains={contains!r}")
            opt = opt.filter(lambda s: contains in s)

        present = opt.is_present()
        if had_input and not present:
            warnings.append(f"Value rejected by filter ({', '.join(filters)})")

        if require:
            reason = f"No value satisfies {', '.join(filters)}" if filters else None
            try:
                resolved = opt.or_else_throw(lambda: NoSuchElementError(reason))
            except NoSuchElementError as exc:
                return ServiceResult.failure(op, exc, filters=filters)
        elif default is not None:
            resolved = opt.or_else(default)
        else:
            resolved = opt.or_else_get(self._supply_fallback)

        source = "held" if present else ("none" if resolved is None else "default")
        logger.debug("Resolved probe: present=%s source=%s", present, source)
        return ServiceResult(
            ok=True,
            op=op,
            data={"present": present, "value": resolved, "source": source},
            warnings=warnings,
        )

    def run_examples(self) -> ServiceResult:
        """Evaluate the canonical usage examples and report their results."""
        examples: list[tuple[str, Any]] = [
            (
                'Optional.of("hello").filter(lambda s: len(s) == 5).get()',
                Optional.of("hello").filter(lambda s: len(s) == 5).get(),
            ),
            (
                'Optional.empty().or_else("default")',
                Optional.empty().or_else("default"),
            ),
            (
                "Optional.of(5).filter(lambda n: n > 10).is_present()",
                Optional.of(5).filter(lambda n: n > 10).is_present(),
            ),
        ]
        return ServiceResult(
            ok=True,
            op="examples",
            data={"examples": [{"expression": expr, "result": result} for expr, result in examples]},
        )

    def _supply_fallback(self) -> str | None:
        logger.debug("Using configured fallback")
        return self._fallback
