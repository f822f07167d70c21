"""Declarative `name: value[, value...]` lines inside a task body.

    ## build
    requires: test, lint
    env: GOOS=linux
    dir: ./cmd
    inputs: VERSION
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .cursor import LineCursor
from .errors import DuplicateDirectoryError
from .models import Task
from .utils import clean, split_values


class Attribute(Enum):
    # Tasks that must run before this one.
    REQUIRES = "depends_on"
    # Environment variables, as KEY=value.
    ENV = "env"
    # Working directory; may only be set once per task.
    DIR = "dir"
    # Inputs supplied as arguments or environment variables.
    INPUTS = "inputs"


ATTRIBUTES: dict[str, Attribute] = {
    "req": Attribute.REQUIRES,
    "requires": Attribute.REQUIRES,
    "env": Attribute.ENV,
    "environment": Attribute.ENV,
    "dir": Attribute.DIR,
    "directory": Attribute.DIR,
    "inputs": Attribute.INPUTS,
}


def classify(line: str) -> Optional[tuple[Attribute, str]]:
    name, sep, rest = line.partition(":")
    if not sep:
        return None
    attr = ATTRIBUTES.get(clean(name).lower())
    if attr is None:
        return None
    return attr, rest


def apply_attribute(cursor: LineCursor, task: Task) -> bool:
    """Apply an attribute line at `cursor.current` to `task`.

    Returns False (consuming nothing) when the line is not an attribute.
    List attributes accumulate across repeated lines; `dir` raises
    DuplicateDirectoryError the second time it appears.
    """
    found = classify(cursor.current)
    if found is None:
        return False
    attr, rest = found
    if attr is Attribute.DIR:
        if task.dir is not None:
            raise DuplicateDirectoryError(task.name)
        task.dir = clean(rest)
    else:
        getattr(task, attr.value).extend(split_values(rest))
    cursor.advance()
    return True
