"""Board state models."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from ..utils import generate_token
from .task import Task

ERROR_BOARD_TITLE = "Error Loading Board"


class Column(BaseModel):
    """A board column owning an ordered list of tasks."""

    id: str = Field(default_factory=generate_token)  # Regenerated on every parse
    title: str
    tasks: list[Task] = Field(default_factory=list)
    archived: bool = False

    def find_task(self, task_id: str) -> tuple[int, Task] | None:
        """Return (index, task) for a task id, or None if not in this column."""
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index, task
        return None


class Board(BaseModel):
    """Full parsed document: title, ordered columns and the id counter."""

    title: str = ""
    columns: list[Column] = Field(default_factory=list)
    next_id: int = 1  # Persisted as <!-- next-id: N -->, never decreases

    @classmethod
    def error_placeholder(cls) -> Board:
        """Empty board shown when a document could not be loaded."""
        return cls(title=ERROR_BOARD_TITLE)

    def get_column(self, column_id: str) -> Column | None:
        """Get a column by id."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def find_task(self, column_id: str, task_id: str) -> Task | None:
        """Get a task by owning column id and task id."""
        column = self.get_column(column_id)
        if column is None:
            return None
        found = column.find_task(task_id)
        return found[1] if found else None

    def iter_tasks(self) -> Iterator[Task]:
        """Iterate over all tasks in column/task order."""
        for column in self.columns:
            yield from column.tasks

    def task_ids(self) -> set[str]:
        """Set of all task ids on the board."""
        return {task.id for task in self.iter_tasks()}
