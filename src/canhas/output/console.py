"""Buffered Rich consoles for CLI reports.

Formatters print into an in-memory console and hand the rendered text back
to the command, which decides where it goes. Colour is only emitted when
the console is told the output is a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

CANHAS_THEME = Theme(
    {
        "canhas.ok": "bold green",
        "canhas.error": "bold red",
        "canhas.value": "bold",
        "canhas.key": "dim",
        "canhas.rule": "bold cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console whose output is kept in memory.

    A fixed width keeps long URLs from wrapping differently per terminal.
    """
    return Console(
        file=StringIO(),
        theme=CANHAS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console from :func:`create_console` so far."""
    if not isinstance(console.file, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return console.file.getvalue()


def verdict(valid: bool) -> str:
    """Styled ``OK``/``INVALID`` label for one checked value."""
    return "[canhas.ok]OK[/]" if valid else "[canhas.error]INVALID[/]"
