"""Data models."""

from .board import ERROR_BOARD_TITLE, Board, Column
from .enums import ChecklistKey, Priority, TaskHeaderStyle, Workload
from .kanban_config import KanbanConfig
from .task import (
    ACCEPTED_ID_RE,
    CANONICAL_ID_RE,
    ChecklistItem,
    Task,
    TaskDraft,
    canonicalize_id,
)

__all__ = [
    "ACCEPTED_ID_RE",
    "CANONICAL_ID_RE",
    "ERROR_BOARD_TITLE",
    "Board",
    "ChecklistItem",
    "ChecklistKey",
    "Column",
    "KanbanConfig",
    "Priority",
    "Task",
    "TaskDraft",
    "TaskHeaderStyle",
    "Workload",
    "canonicalize_id",
]
