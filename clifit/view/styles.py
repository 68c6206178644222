"""Text styling for rendered views.

Stateless: a fixed style table keyed by StyleTag, and functions that turn
plain view lines into rich renderables.
"""

from collections.abc import Iterable
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from rich.console import Group
from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from clifit.view.projector import ViewLine


class StyleTag(StrEnum):
    TITLE = "title"
    BLOCK = "block"
    EXERCISE = "exercise"
    DIM = "dim"
    HIGHLIGHT = "highlight"
    SELECTED = "selected"
    HELP = "help"


# 256-colour palette indices
STYLES = MappingProxyType(
    {
        StyleTag.TITLE: Style(bold=True, color="color(212)"),
        StyleTag.BLOCK: Style(bold=True, color="color(86)"),
        StyleTag.EXERCISE: Style(color="color(252)"),
        StyleTag.DIM: Style(color="color(240)"),
        StyleTag.HIGHLIGHT: Style(bold=True, color="color(229)"),
        StyleTag.SELECTED: Style(bold=True, color="color(212)"),
        StyleTag.HELP: Style(color="color(241)"),
    }
)


def format_text(text: str, tag: StyleTag) -> Text:
    """Apply the style for tag to text."""
    return Text(text, style=STYLES[tag])


def to_renderable(lines: Iterable["ViewLine"]) -> Group:
    """Convert view lines into a single rich renderable, one line each."""
    return Group(*(format_text(line.text, line.style) for line in lines))
