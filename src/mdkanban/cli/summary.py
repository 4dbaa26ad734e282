"""Summary command: print an overview of the board."""

from ..models import Board, ChecklistKey, Task
from ..services import DocumentService
from .output import error, header, info, muted, progress


def _checklist_progress(task: Task) -> str:
    """Combined progress over all checklists, "" when the task has none."""
    items = [item for key in ChecklistKey for item in (task.checklist(key) or [])]
    if not items:
        return ""
    done = sum(1 for item in items if item.completed)
    return progress(done, len(items))


def format_task(task: Task) -> str:
    """One summary line for a task."""
    parts = [task.id, task.title]
    if task.priority is not None:
        parts.append(f"[{task.priority.value}]")
    if task.tags:
        parts.append(" ".join(f"#{tag}" for tag in task.tags))
    checklist = _checklist_progress(task)
    if checklist:
        parts.append(f"({checklist})")
    if task.due_date:
        parts.append(f"due {task.due_date}")
    return " ".join(parts)


def print_board(board: Board) -> None:
    """Print columns and their tasks."""
    header(board.title or "(untitled board)")
    for column in board.columns:
        suffix = " [Archived]" if column.archived else ""
        info(f"{column.title}{suffix} ({len(column.tasks)})")
        for task in column.tasks:
            muted(f"    {format_task(task)}")
    muted(f"next id: TSK_{board.next_id}")


def run_summary(service: DocumentService) -> int:
    """
    Load the document and print its summary.

    Returns:
        Exit code (0 = success, 1 = the document could not be loaded)
    """
    board = service.load()
    if service.load_error:
        error(service.load_error)
        return 1
    print_board(board)
    return 0
