"""Forward-only access to the input with exactly one line of lookahead."""

from __future__ import annotations

from typing import Iterable, Iterator

from .errors import StreamReadError


class LineCursor:
    """Two-slot line buffer over any iterable of lines.

    `current` is the line being examined and `next` the one after it. Once the
    underlying stream runs dry `next` becomes empty, but the pending last line
    is still shifted into `current` by one more `advance()`. Only the call after
    that reports the end (returns False) and clears `current`.
    """

    def __init__(self, stream: Iterable[str]):
        self._lines: Iterator[str] = iter(stream)
        self.current = ""
        self.next = ""
        self.exhausted = False
        # Set once advance() has reported the end of input.
        self.done = False

    def advance(self) -> bool:
        if self.exhausted:
            self.current = ""
            self.done = True
            return False
        self.current = self.next
        try:
            line = next(self._lines)
        except StopIteration:
            self.exhausted = True
            self.next = ""
            return True
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(str(e)) from e
        self.next = line.rstrip("\r\n")
        return True
