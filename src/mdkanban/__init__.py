"""Markdown-backed kanban board: parse and serialize board documents."""

from .document import parse, serialize
from .models import Board, ChecklistItem, Column, Task

__version__ = "0.1.0"

__all__ = [
    "Board",
    "ChecklistItem",
    "Column",
    "Task",
    "__version__",
    "parse",
    "serialize",
]
