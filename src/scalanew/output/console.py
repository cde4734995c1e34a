"""Rich Console factory and theme for scalanew output.

Consoles render to a StringIO buffer so ``format_result() -> str`` stays a
pure function. Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SCALANEW_THEME = Theme(
    {
        "scala.ok": "bold green",
        "scala.error": "bold red",
        "scala.warning": "bold yellow",
        "scala.op": "bold cyan",
        "scala.key": "dim",
        "scala.name": "bold blue",
        "scala.package": "magenta",
        "scala.path": "dim",
        "scala.kind": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SCALANEW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
