"""Serializer: Board -> canonical board document text."""

from __future__ import annotations

from enum import Enum

from ..models import Board, ChecklistItem, ChecklistKey, Column, Task, TaskHeaderStyle
from .classifier import ARCHIVED_SUFFIX, HEADER_ID_RE
from .ids import IdAllocator

CHECKLIST_LABELS = (
    (ChecklistKey.STEPS, "Steps"),
    (ChecklistKey.AC, "AC"),
    (ChecklistKey.VERIFY, "Verify"),
)


def serialize(
    board: Board,
    header_style: TaskHeaderStyle | str = TaskHeaderStyle.HEADING,
) -> str:
    """
    Render a board as document text in the canonical (new) dialect.

    header_style only switches task headers between "### title" and
    "- title"; everything else is identical.
    """
    style = TaskHeaderStyle(header_style)
    board = _with_unambiguous_headers(board)
    lines = [f"<!-- next-id: {board.next_id} -->"]

    if board.title:
        lines += [f"# {board.title}", ""]

    for column in board.columns:
        lines += [f"## {_column_title(column)}", ""]
        for task in column.tasks:
            lines.extend(_task_lines(task, style))

    return "\n".join(lines) + "\n"


def _column_title(column: Column) -> str:
    if column.archived:
        return f"{column.title} {ARCHIVED_SUFFIX}"
    return column.title


def _task_lines(task: Task, style: TaskHeaderStyle) -> list[str]:
    header = f"{task.id} {task.title}" if task.has_canonical_id else task.title
    marker = "###" if style is TaskHeaderStyle.HEADING else "-"
    lines = [f"{marker} {header}"]

    description = (task.description or "").strip()
    metadata = _metadata_line(task)
    if metadata is None and description.startswith(">"):
        # Empty metadata so the quote is read back as description
        metadata = ">"
    if metadata:
        lines.append(metadata)

    if description:
        lines.append("")
        lines.extend(description.split("\n"))

    sections = _section_lines(task)
    if sections:
        if description:
            lines.append("")
        lines.extend(sections)

    lines.append("")
    return lines


def _with_unambiguous_headers(board: Board) -> Board:
    """
    Allocate ids for tasks whose bare title would be read back as an id.

    A task without a canonical id is written as its title alone, so a title
    such as "TSK_9 Foo" needs a real id in front of it. The live board is
    left untouched; a copy is returned when anything changes.
    """
    if not any(_needs_id(task) for task in board.iter_tasks()):
        return board
    board = board.model_copy(deep=True)
    allocator = IdAllocator.for_board(board)
    for task in board.iter_tasks():
        if _needs_id(task):
            task.id = allocator.allocate()
    board.next_id = allocator.next_id
    return board


def _needs_id(task: Task) -> bool:
    return not task.has_canonical_id and HEADER_ID_RE.match(task.title) is not None


def _metadata_line(task: Task) -> str | None:
    """Build the "> tag1, tag2 | priority" line, None if nothing to show."""
    tags = ", ".join(task.tags)
    if task.priority is None:
        return f"> {tags}" if tags else None
    priority = _text(task.priority)
    return f"> {tags} | {priority}" if tags else f"> | {priority}"


def _section_lines(task: Task) -> list[str]:
    lines: list[str] = []
    if task.due_date:
        lines.append(f"**Due:** {task.due_date}")
    if task.workload:
        lines.append(f"**Workload:** {_text(task.workload)}")
    if task.default_expanded:
        lines.append("**Expanded:** true")
    for key, label in CHECKLIST_LABELS:
        items = task.checklist(key)
        # Empty and absent checklists are both omitted
        if items:
            lines.append(f"**{label}:**")
            lines.extend(_checklist_line(item) for item in items)
    if task.files:
        lines.append(f"**Files:** {task.files}")
    return lines


def _checklist_line(item: ChecklistItem) -> str:
    mark = "x" if item.completed else " "
    return f"- [{mark}] {item.text}"


def _text(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value
