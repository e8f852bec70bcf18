"""Rich Console factory and theme for graphwalk output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich emits no
color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPHWALK_THEME = Theme(
    {
        "gw.ok": "bold green",
        "gw.error": "bold red",
        "gw.op": "bold cyan",
        "gw.key": "dim",
        "gw.node": "bold blue",
        "gw.path": "dim",
        "gw.count": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps long paths on one line).
    """
    return Console(
        file=StringIO(),
        theme=GRAPHWALK_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
