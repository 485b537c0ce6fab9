"""Subcommand modules for optionkit.

Provides register_commands() which uses deferred imports to keep
``optionkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from optionkit.commands.examples import examples
    from optionkit.commands.probe import probe

    cli.add_command(probe)
    cli.add_command(examples)
