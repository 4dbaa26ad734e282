"""Enums for task fields and serializer options."""

from enum import Enum


class Priority(str, Enum):
    """Priority levels for tasks."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def lookup(cls, value: str) -> "Priority | None":
        """Match a priority case-insensitively, None if unknown."""
        return _lookup(cls, value)


class Workload(str, Enum):
    """Estimated effort for a task."""

    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
    EXTREME = "Extreme"

    @classmethod
    def lookup(cls, value: str) -> "Workload | None":
        """Match a workload case-insensitively, None if unknown."""
        return _lookup(cls, value)


class ChecklistKey(str, Enum):
    """The three checklists a task may carry."""

    STEPS = "steps"
    AC = "ac"
    VERIFY = "verify"


class TaskHeaderStyle(str, Enum):
    """How the serializer renders task header lines."""

    HEADING = "heading"  # ### Title
    LIST = "list"  # - Title


def _lookup(enum_cls, value: str):
    wanted = value.strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    return None
