"""Identifier allocation for tasks."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Board, Task, canonicalize_id


class IdAllocator:
    """
    Hands out TSK_<n> ids from a monotonic counter.

    The counter persisted in the document is authoritative; ids that are
    already claimed are skipped so a hand-edited document can never
    produce duplicates.
    """

    def __init__(self, next_id: int = 1, taken: Iterable[str] = ()) -> None:
        self.next_id = next_id
        self._taken: set[str] = set(taken)

    @classmethod
    def for_board(cls, board: Board) -> IdAllocator:
        """Allocator continuing from a board's counter and existing ids."""
        return cls(board.next_id, board.task_ids())

    def claim(self, task_id: str) -> str | None:
        """
        Reserve an explicit id found in the document.

        Returns the canonical form, or None if the id is not of the
        TSK_<n> / TSK-<n> form or is already claimed.
        """
        canonical = canonicalize_id(task_id)
        if canonical is None or canonical in self._taken:
            return None
        self._taken.add(canonical)
        return canonical

    def allocate(self) -> str:
        """Return the next unused TSK_<n> id and advance the counter."""
        number = self.next_id
        while f"TSK_{number}" in self._taken:
            number += 1
        task_id = f"TSK_{number}"
        self._taken.add(task_id)
        self.next_id = number + 1
        return task_id


def allocate_ids(board: Board) -> int:
    """
    Give every task on the board a unique canonical id.

    Explicit ids are claimed first; every remaining task, in column/task
    order, is assigned the next id from the counter. Updates board.next_id
    and returns the number of ids assigned.
    """
    allocator = IdAllocator(board.next_id)
    pending: list[Task] = []

    for task in board.iter_tasks():
        canonical = allocator.claim(task.id)
        if canonical is None:
            pending.append(task)
        else:
            task.id = canonical

    for task in pending:
        task.id = allocator.allocate()

    board.next_id = allocator.next_id
    return len(pending)
