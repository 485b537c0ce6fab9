"""optionkit probe — run a value through the Optional container."""

from __future__ import annotations

import click

from optionkit.commands._context import AppContext


@click.command(
    epilog="""\b
Examples:
  optionkit probe hello --min-length 3
  optionkit probe --default fallback
  optionkit probe hi --min-length 5 --require
  optionkit probe --strict""",
)
@click.argument("value", required=False)
@click.option("--strict", is_flag=True, help="Wrap with of() instead of of_nullable().")
@click.option(
    "--min-length",
    type=click.IntRange(min=0),
    default=None,
    help="Keep values at least N chars long.",
)
@click.option("--contains", default=None, help="Keep values containing this substring.")
@click.option("--default", "default", default=None, help="Fallback when the result is empty.")
@click.option("--require", is_flag=True, help="Fail when the result is empty.")
@click.pass_obj
def probe(
    app: AppContext,
    value: str | None,
    strict: bool,
    min_length: int | None,
    contains: str | None,
    default: str | None,
    require: bool,
) -> None:
    """Wrap VALUE in an Optional, filter it, and resolve the result."""
    result = app.probe_service().probe(
        value,
        nullable=not strict,
        min_length=min_length,
        contains=contains,
        default=default,
        require=require,
    )
    app.emit(result)
