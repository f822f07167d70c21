from __future__ import annotations


class ParseError(Exception):
    """Base class for every fatal error raised while reading a task document."""


class NoSectionFoundError(ParseError):
    def __init__(self, heading: str):
        self.heading = heading
        super().__init__(f"no section found with heading '{heading}'")


class TaskError(ParseError):
    """An error tied to a single task; `task` holds its name."""

    message = "invalid task {task}"

    def __init__(self, task: str):
        self.task = task
        super().__init__(self.message.format(task=task))


class DuplicateDirectoryError(TaskError):
    message = "directory appears more than once for task {task}"


class DuplicateCodeBlockError(TaskError):
    message = "command block already exists for task {task}"


class UnterminatedCodeBlockError(TaskError):
    message = "command block in task {task} was not ended"


class EmptyTaskError(TaskError):
    message = "task {task} has no commands or required tasks"


class StreamReadError(ParseError):
    def __init__(self, reason: str):
        super().__init__(f"failed to read input: {reason}")
