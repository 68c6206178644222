"""Raw keypress reading.

Uses click's getchar (the terminal layer typer is built on), which puts
the terminal in raw mode for a single keypress, and normalises the result
into the key tokens the dispatcher understands.
"""

from collections.abc import Callable

import click

INTERRUPT = "ctrl+c"

ESCAPE_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    # Windows arrow keys
    "\xe0H": "up",
    "\xe0P": "down",
    "\x00H": "up",
    "\x00P": "down",
}

SPECIAL_KEYS: dict[str, str] = {
    "\r": "enter",
    "\n": "enter",
    "\r\n": "enter",
    " ": "space",
    "\x03": INTERRUPT,
    "\x1b": "escape",
}


def normalize_key(raw: str) -> str:
    """Turn raw terminal input into a key token."""
    if raw in ESCAPE_SEQUENCES:
        return ESCAPE_SEQUENCES[raw]
    if raw in SPECIAL_KEYS:
        return SPECIAL_KEYS[raw]
    return raw


def read_key(getchar: Callable[[], str] = click.getchar) -> str:
    """Block for one keypress and return its token.

    Ctrl+C and end of input both come back as the interrupt token so the
    caller can treat them as quit.
    """
    try:
        raw = getchar()
    except (KeyboardInterrupt, EOFError):
        return INTERRUPT
    return normalize_key(raw)
