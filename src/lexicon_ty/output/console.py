"""Rich Console factory and theme for lexicon-ty output.

Consoles render into a StringIO buffer so renderers return plain
strings. Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LEX_THEME = Theme(
    {
        "lex.ok": "bold green",
        "lex.error": "bold red",
        "lex.warning": "bold yellow",
        "lex.op": "bold cyan",
        "lex.key": "dim",
        "lex.id": "bold blue",
        "lex.path": "dim",
        "lex.location": "magenta",
        "lex.def.endpoint": "green",
        "lex.def.record": "blue",
        "lex.def.type": "yellow",
    }
)

_DEF_STYLES: dict[str, str] = {
    "query": "lex.def.endpoint",
    "procedure": "lex.def.endpoint",
    "subscription": "lex.def.endpoint",
    "record": "lex.def.record",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=LEX_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_def(def_type: str) -> str:
    """Rich style for a definition ``type`` tag; plain types share one style."""
    return _DEF_STYLES.get(def_type, "lex.def.type")
