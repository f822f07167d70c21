from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional


@dataclass
class Task:
    name: str
    description: list[str] = field(default_factory=list)
    script: str = ""
    env: list[str] = field(default_factory=list)
    dir: Optional[str] = None
    depends_on: list[str] = field(default_factory=list)
    inputs: list[str] = field(default_factory=list)

    def is_runnable(self) -> bool:
        """A task needs either commands to run or other tasks to require."""
        return bool(self.name) and (bool(self.script) or bool(self.depends_on))

    def to_dict(self) -> dict:
        return asdict(self)


class Tasks(list):
    """Tasks in document order. Duplicate names are left for callers to judge."""

    def find(self, name: str) -> Optional[Task]:
        wanted = name.strip().casefold()
        for t in self:
            if t.name.casefold() == wanted:
                return t
        return None

    def names(self) -> list[str]:
        return [t.name for t in self]
