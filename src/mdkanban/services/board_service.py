"""Service for board mutations."""

from __future__ import annotations

import logging

from ..document import IdAllocator
from ..models import Board, ChecklistKey, Column, Task, TaskDraft

logger = logging.getLogger(__name__)


class BoardService:
    """
    Mutations requested against a live board.

    Every operation mutates the board in place and returns it. Unknown
    column/task ids and out-of-range indices leave the board unchanged.
    """

    # --- Task Operations ---

    def add_task(self, board: Board, column_id: str, draft: TaskDraft) -> Board:
        """Append a new task to a column, allocating the next TSK_<n> id."""
        column = board.get_column(column_id)
        if column is None:
            logger.debug("add_task: column not found: %s", column_id)
            return board

        allocator = IdAllocator.for_board(board)
        task = draft.to_task(allocator.allocate())
        board.next_id = allocator.next_id
        column.tasks.append(task)

        logger.info("Task created: %s in %r (next_id=%d)", task.id, column.title, board.next_id)
        return board

    def delete_task(self, board: Board, column_id: str, task_id: str) -> Board:
        """Remove a task from its column. Its id is never reused."""
        column = board.get_column(column_id)
        found = column.find_task(task_id) if column else None
        if column is None or found is None:
            logger.debug("delete_task: task not found: %s/%s", column_id, task_id)
            return board

        del column.tasks[found[0]]
        logger.info("Task deleted: %s", task_id)
        return board

    def edit_task(self, board: Board, column_id: str, task_id: str, draft: TaskDraft) -> Board:
        """Overwrite the fields set on the draft; the task keeps its id."""
        task = board.find_task(column_id, task_id)
        if task is None:
            logger.debug("edit_task: task not found: %s/%s", column_id, task_id)
            return board

        draft.apply_to(task)
        logger.info("Task edited: %s (%s)", task_id, ", ".join(sorted(draft.model_fields_set)))
        return board

    def move_task(
        self,
        board: Board,
        task_id: str,
        from_column_id: str,
        to_column_id: str,
        index: int,
    ) -> Board:
        """Move a task to position index in another (or the same) column."""
        from_column = board.get_column(from_column_id)
        to_column = board.get_column(to_column_id)
        if from_column is None or to_column is None:
            logger.debug("move_task: column not found: %s -> %s", from_column_id, to_column_id)
            return board

        found = from_column.find_task(task_id)
        if found is None:
            logger.debug("move_task: task not found: %s", task_id)
            return board

        task = from_column.tasks.pop(found[0])
        to_column.tasks.insert(index, task)
        logger.info(
            "Task moved: %s (%r -> %r, index %d)", task_id, from_column.title, to_column.title, index
        )
        return board

    # --- Column Operations ---

    def add_column(self, board: Board, title: str) -> Board:
        """Append an empty column."""
        column = Column(title=title)
        board.columns.append(column)
        logger.info("Column created: %r (%s)", title, column.id)
        return board

    def move_column(self, board: Board, from_index: int, to_index: int) -> Board:
        """Move the column at from_index to to_index."""
        count = len(board.columns)
        if from_index == to_index:
            return board
        if not (0 <= from_index < count and 0 <= to_index < count):
            logger.debug("move_column: index out of range: %d -> %d", from_index, to_index)
            return board

        column = board.columns.pop(from_index)
        board.columns.insert(to_index, column)
        logger.info("Column moved: %r (%d -> %d)", column.title, from_index, to_index)
        return board

    def toggle_column_archive(
        self, board: Board, column_id: str, archived: bool | None = None
    ) -> Board:
        """Set a column's archived flag, or flip it when archived is None."""
        column = board.get_column(column_id)
        if column is None:
            logger.debug("toggle_column_archive: column not found: %s", column_id)
            return board

        column.archived = (not column.archived) if archived is None else archived
        logger.info("Column %r archived=%s", column.title, column.archived)
        return board

    # --- Checklist Operations ---

    def reorder_checklist(
        self,
        board: Board,
        column_id: str,
        task_id: str,
        new_order: list[int],
        key: ChecklistKey | str = ChecklistKey.STEPS,
    ) -> Board:
        """
        Reorder a checklist by a permutation of its indices.

        new_order[i] is the old index of the item that ends up at position i.
        Anything that is not a full permutation is rejected.
        """
        items = self._get_checklist(board, column_id, task_id, key)
        if items is None:
            return board

        if sorted(new_order) != list(range(len(items))):
            logger.debug("reorder_checklist: not a permutation of %d items: %s", len(items), new_order)
            return board

        items[:] = [items[index] for index in new_order]
        logger.debug("Checklist reordered: %s/%s %s", task_id, ChecklistKey(key).value, new_order)
        return board

    def update_checklist_item(
        self,
        board: Board,
        column_id: str,
        task_id: str,
        key: ChecklistKey | str,
        index: int,
        completed: bool | None = None,
    ) -> Board:
        """Set one item's completion, or toggle it when completed is None."""
        items = self._get_checklist(board, column_id, task_id, key)
        if items is None:
            return board

        if not 0 <= index < len(items):
            logger.debug("update_checklist_item: index out of range: %d", index)
            return board

        item = items[index]
        item.completed = (not item.completed) if completed is None else completed
        logger.debug(
            "Checklist item updated: %s/%s[%d] completed=%s",
            task_id,
            ChecklistKey(key).value,
            index,
            item.completed,
        )
        return board

    def _get_checklist(
        self, board: Board, column_id: str, task_id: str, key: ChecklistKey | str
    ) -> list | None:
        task: Task | None = board.find_task(column_id, task_id)
        if task is None:
            logger.debug("checklist: task not found: %s/%s", column_id, task_id)
            return None
        try:
            items = task.checklist(key)
        except ValueError:
            logger.debug("checklist: unknown list key: %s", key)
            return None
        if items is None:
            logger.debug("checklist: %s has no %s list", task_id, key)
        return items
