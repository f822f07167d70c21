"""Single-pass parser turning a markdown document into a list of tasks.

Tasks live under a section heading (`# Tasks` by default). Every heading one
level below it opens a task, and the task body may hold attribute lines, free
text and one fenced command block:

    # Tasks

    ## build
    Builds the binary.
    requires: test
    ```
    go build ./...
    ```

The section ends at the next heading at or above the section's own level.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, Optional

from .attributes import apply_attribute
from .cursor import LineCursor
from .errors import (
    DuplicateCodeBlockError,
    EmptyTaskError,
    NoSectionFoundError,
    ParseError,
    StreamReadError,
    UnterminatedCodeBlockError,
)
from .headings import Heading, match_heading
from .models import Task, Tasks
from .utils import clean

FENCE = "```"

log = logging.getLogger("mdtasks.parser")


class State(Enum):
    SEEKING_SECTION = auto()
    IN_TASK_SEARCH = auto()
    IN_TASK_BODY = auto()
    DONE = auto()
    FAILED = auto()


def read_code_block(cursor: LineCursor, task: Task) -> bool:
    """Capture a fenced block at `cursor.current` into `task.script`.

    Blank lines inside the block are dropped; every other line is kept verbatim
    and newline-terminated. Both fence lines are consumed.
    """
    if not cursor.current.startswith(FENCE):
        return False
    if task.script:
        raise DuplicateCodeBlockError(task.name)
    lines: list[str] = []
    while cursor.advance():
        if cursor.current.startswith(FENCE):
            break
        if cursor.current.strip():
            lines.append(cursor.current + "\n")
    else:
        raise UnterminatedCodeBlockError(task.name)
    task.script = "".join(lines)
    cursor.advance()
    return True


class Parser:
    """Parses one document. Build a new instance per document."""

    def __init__(self, stream: Iterable[str], heading: str = "Tasks"):
        self.heading = heading
        self.cursor = LineCursor(stream)
        self.state = State.SEEKING_SECTION
        self.root_level = 0
        self.tasks = Tasks()
        self._task: Optional[Task] = None
        self.error: Optional[ParseError] = None

    def parse(self) -> Tasks:
        if self.state is State.FAILED:
            raise self.error
        try:
            while self.state is not State.DONE:
                if self.state is State.SEEKING_SECTION:
                    self._seek_section()
                elif self.state is State.IN_TASK_SEARCH:
                    self._search_task()
                elif self.state is State.IN_TASK_BODY:
                    self._read_body()
        except ParseError as e:
            self.state = State.FAILED
            self.error = e
            self.tasks = Tasks()
            log.debug("Parse failed: %s", e)
            raise
        log.debug("Parsed %d task(s) under '%s'", len(self.tasks), self.heading)
        return self.tasks

    def _seek_section(self) -> None:
        wanted = self.heading.strip().casefold()
        more = self.cursor.advance()
        while more:
            heading = match_heading(self.cursor, advance=True)
            if heading is None:
                more = self.cursor.advance()
                continue
            if heading.text.strip().casefold() == wanted:
                self.root_level = heading.level
                log.debug("Found section '%s' at level %d", heading.text, heading.level)
                self.state = State.IN_TASK_SEARCH
                return
            more = not self.cursor.done
        raise NoSectionFoundError(self.heading)

    def _search_task(self) -> None:
        while True:
            heading = match_heading(self.cursor)
            if heading is not None and heading.level <= self.root_level:
                self.state = State.DONE
                return
            if heading is not None and heading.level == self.root_level + 1:
                match_heading(self.cursor, advance=True)
                self._task = Task(name=clean(heading.text))
                self.state = State.IN_TASK_BODY
                return
            if not self.cursor.advance():
                self.state = State.DONE
                return

    def _read_body(self) -> None:
        task = self._task
        next_state = State.DONE
        while True:
            if apply_attribute(self.cursor, task):
                continue
            if read_code_block(self.cursor, task):
                continue
            heading = self._boundary()
            if heading is not None:
                if heading.level == self.root_level + 1:
                    next_state = State.IN_TASK_SEARCH
                break
            if self.cursor.current.strip():
                task.description.append(clean(self.cursor.current))
            if not self.cursor.advance():
                break
        self._finish(task)
        self.state = next_state

    def _boundary(self) -> Optional[Heading]:
        heading = match_heading(self.cursor)
        if heading is not None and heading.level <= self.root_level + 1:
            return heading
        return None

    def _finish(self, task: Task) -> None:
        if not task.is_runnable():
            raise EmptyTaskError(task.name)
        self.tasks.append(task)
        self._task = None
        log.debug("Task '%s' accepted", task.name)


def parse(stream: Iterable[str], heading: str = "Tasks") -> Tasks:
    return Parser(stream, heading).parse()


def parse_file(path: str | Path, heading: str = "Tasks", encoding: str = "utf-8") -> Tasks:
    p = Path(path)
    try:
        f = open(p, "r", encoding=encoding)
    except OSError as e:
        raise StreamReadError(f"{p}: {e}") from e
    with f:
        return parse(f, heading)
