"""Parse task definitions out of markdown documents.

Provides the single-pass Parser, the Task model and its error types, plus a small
Typer CLI for inspecting a document.
"""

from .errors import (
    ParseError,
    NoSectionFoundError,
    DuplicateDirectoryError,
    DuplicateCodeBlockError,
    UnterminatedCodeBlockError,
    EmptyTaskError,
    StreamReadError,
)
from .models import Task, Tasks
from .parser import Parser, parse, parse_file  # re-export for convenience

__all__ = [
    "Parser",
    "parse",
    "parse_file",
    "Task",
    "Tasks",
    "ParseError",
    "NoSectionFoundError",
    "DuplicateDirectoryError",
    "DuplicateCodeBlockError",
    "UnterminatedCodeBlockError",
    "EmptyTaskError",
    "StreamReadError",
]
