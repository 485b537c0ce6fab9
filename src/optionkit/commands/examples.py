"""optionkit examples — evaluate the canonical usage examples."""

from __future__ import annotations

import click

from optionkit.commands._context import AppContext


@click.command()
@click.pass_obj
def examples(app: AppContext) -> None:
    """Show what the Optional container returns for typical calls."""
    app.emit(app.probe_service().run_examples())
