from __future__ import annotations

from typing import NamedTuple, Optional

from .cursor import LineCursor
from .utils import only_repeats

MARKER = "#"

# Underline character -> heading level
UNDERLINES = {"=": 1, "-": 2}


class Heading(NamedTuple):
    level: int
    text: str


def _underline_heading(cursor: LineCursor) -> Optional[Heading]:
    text = cursor.current.strip()
    underline = cursor.next.strip()
    if not text:
        return None
    for char, level in UNDERLINES.items():
        if only_repeats(underline, char):
            return Heading(level, text)
    return None


def _marker_heading(cursor: LineCursor) -> Optional[Heading]:
    tokens = cursor.current.split()
    if len(tokens) < 2 or not only_repeats(tokens[0], MARKER):
        return None
    return Heading(len(tokens[0]), " ".join(tokens[1:]))


def match_heading(cursor: LineCursor, advance: bool = False) -> Optional[Heading]:
    """Recognise a heading starting at `cursor.current`.

    Underlined headings (`Title` over `====` or `----`) are tried before
    `#`-marker headings. With `advance` the heading lines are consumed: two for
    the underlined form, one for the marker form. Nothing is consumed when no
    heading is found.
    """
    heading = _underline_heading(cursor)
    if heading is not None:
        if advance:
            cursor.advance()
            cursor.advance()
        return heading
    heading = _marker_heading(cursor)
    if heading is not None and advance:
        cursor.advance()
    return heading
