from __future__ import annotations

import logging
import typing

from pygments.lexers import get_lexer_by_name
from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text

from ._models import ResponseSnapshot
from ._themes import THEME
from ._utils import quote_header_value

logger = logging.getLogger(__name__)

# Media types with a highlighter, mapped to their pygments lexer.
LEXERS = {
    "application/json": "json",
    "text/html": "html",
}


def make_console(file: typing.IO[str] | None = None) -> Console:
    """
    A console that always emits 24-bit color, whatever the output is.

    ``file`` defaults to whatever ``sys.stdout`` is at write time.
    """
    return Console(
        file=file,
        force_terminal=True,
        color_system="truecolor",
        no_color=False,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


def classify(mime: str | None) -> str | None:
    """Return the lexer name for ``mime``, or ``None`` to print verbatim."""
    return LEXERS.get(mime) if mime is not None else None


def print_status(console: Console, snapshot: ResponseSnapshot) -> None:
    console.print(Text(snapshot.status_line, style="blue"))
    console.print()


def print_headers(console: Console, snapshot: ResponseSnapshot) -> None:
    for name, value in snapshot.headers:
        line = Text()
        line.append(name, style="green")
        line.append(f": {quote_header_value(value)}")
        console.print(line)
    console.print()


def highlight(text: str, lexer: str) -> str:
    """
    Wrap every token of ``text`` in 24-bit foreground and background escapes.

    The raw token stream is used, so line endings, tabs and control
    characters come out exactly as they went in.
    """
    background = THEME.get_background_style()
    pieces = []
    for _, token_type, value in get_lexer_by_name(lexer).get_tokens_unprocessed(text):
        style = background + THEME.get_style_for_token(token_type)
        pieces.append(style.render(value, color_system=ColorSystem.TRUECOLOR))
    return "".join(pieces)


def print_syntax(console: Console, text: str, lexer: str) -> None:
    """Print ``text`` highlighted with the given pygments lexer."""
    # Written around rich, which would strip control codes and expand tabs.
    console.file.write(highlight(text, lexer))
    if not text.endswith("\n"):
        console.file.write("\n")
    console.file.flush()


def print_verbatim(console: Console, text: str) -> None:
    console.file.write(text)
    console.file.write("\n")
    console.file.flush()


def print_body(console: Console, mime: str | None, text: str) -> None:
    lexer = classify(mime)
    logger.debug("Body of type %r printed %s", mime, f"as {lexer}" if lexer else "verbatim")
    if lexer is None:
        print_verbatim(console, text)
    else:
        print_syntax(console, text, lexer)


def render(snapshot: ResponseSnapshot, console: Console | None = None) -> None:
    """
    Print the status line, the headers and the body of a response.
    """
    if console is None:
        console = make_console()
    print_status(console, snapshot)
    print_headers(console, snapshot)
    print_body(console, snapshot.mime, snapshot.text)
