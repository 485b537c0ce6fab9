"""Rich Console factory and theme for optionkit output.

Consoles render to a StringIO buffer so renderers keep a
``render() -> str`` contract.  In non-TTY environments (tests, pipes)
Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

OPTIONKIT_THEME = Theme(
    {
        "opt.ok": "bold green",
        "opt.error": "bold red",
        "opt.warning": "bold yellow",
        "opt.op": "bold cyan",
        "opt.key": "dim",
        "opt.present": "green",
        "opt.empty": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=OPTIONKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
