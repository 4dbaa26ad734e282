"""Parser state machine: board document text -> Board."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ..models import Board, ChecklistItem, ChecklistKey, Column, Priority, Task, Workload
from ..utils import generate_token
from .classifier import COUNTER_RE, ClassifiedLine, LineContext, LineRole, classify
from .ids import allocate_ids

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "tmp-"
LEGACY_TAGS_RE = re.compile(r"\[(.*)\]")
CHECKLIST_KEYS = {key.value for key in ChecklistKey}


def normalize_newlines(text: str) -> str:
    """Fold \\r\\n and \\r line endings to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_counter(text: str) -> int:
    """Read the <!-- next-id: N --> counter from anywhere in the text, default 1."""
    match = COUNTER_RE.search(text)
    if match is None:
        return 1
    return int(match.group(1))


def parse(text: str) -> Board:
    """
    Parse a board document into a Board.

    Malformed constructs are ignored or folded into descriptions; this does
    not raise for arbitrary text. Tasks without a usable id receive
    TSK_<n> ids from the document counter once parsing is complete.
    """
    text = normalize_newlines(text)
    board = Board(next_id=read_counter(text))
    parser = _DocumentParser(board)

    lines = text.split("\n")
    index = 0
    while index < len(lines):
        classified = classify(lines[index], parser.context())
        # A boundary closes the open task; the same line is then re-presented
        if parser.step(classified):
            index += 1

    parser.finish()
    assigned = allocate_ids(board)
    logger.debug(
        "Parsed board %r: %d columns, %d tasks, %d ids assigned, next_id=%d",
        board.title,
        len(board.columns),
        sum(len(column.tasks) for column in board.columns),
        assigned,
        board.next_id,
    )
    return board


@dataclass
class _DocumentParser:
    """Accumulated state for one parse, advanced one classified line at a time."""

    board: Board
    column: Column | None = None
    task: Task | None = None
    description: list[str] = field(default_factory=list)
    pending_blanks: int = 0

    in_fence: bool = False
    in_legacy_fence: bool = False
    legacy_task: bool = False
    metadata_allowed: bool = False
    collecting_description: bool = False
    legacy_description: bool = False
    active_list: ChecklistKey | None = None
    active_list_legacy: bool = False

    def context(self) -> LineContext:
        """Snapshot of the state the classifier consults."""
        return LineContext(
            in_fence=self.in_fence,
            in_legacy_fence=self.in_legacy_fence,
            has_title=bool(self.board.title),
            in_task=self.task is not None,
            legacy_task=self.legacy_task,
            metadata_allowed=self.metadata_allowed,
            collecting_description=self.collecting_description,
            legacy_description=self.legacy_description,
            active_list=self.active_list,
            active_list_legacy=self.active_list_legacy,
        )

    def step(self, line: ClassifiedLine) -> bool:
        """
        Apply one classified line.

        Returns False when the line was a boundary and must be classified
        again now that the open task is closed.
        """
        role = line.role

        if role in (LineRole.COMMENT, LineRole.FENCED, LineRole.IGNORED):
            return True
        if role is LineRole.FENCE:
            self.in_fence = not self.in_fence
        elif role is LineRole.BLANK:
            if self.collecting_description and self.description:
                self.pending_blanks += 1
        elif role is LineRole.BOUNDARY:
            self._finalize_task()
            return False
        elif role is LineRole.DOCUMENT_TITLE:
            self._finalize_task()
            self.board.title = line.value
        elif role is LineRole.COLUMN_HEADER:
            self._open_column(line)
        elif role is LineRole.TASK_HEADER:
            self._open_task(line)
        elif role is LineRole.METADATA:
            self._apply_metadata(line.value)
        elif role is LineRole.SECTION_HEADER:
            self._apply_section(line.key or "", line.value)
        elif role in (LineRole.CHECKLIST_ITEM, LineRole.LEGACY_CHECKLIST_ITEM):
            self._add_checklist_item(line)
        elif role is LineRole.LEGACY_PROPERTY:
            self._apply_property(line.key or "", line.value)
        elif role is LineRole.LEGACY_FENCE:
            self._toggle_legacy_fence()
        elif role is LineRole.DESCRIPTION:
            self.metadata_allowed = False
            self._append_description(line.value)
        elif role in (LineRole.IMAGE, LineRole.LEGACY_CONTINUATION, LineRole.LEGACY_FENCED):
            self._append_description(line.value)
        return True

    def finish(self) -> None:
        """Flush the open task and column at end of input."""
        self._finalize_task()
        if self.column is not None:
            self.board.columns.append(self.column)
            self.column = None

    # --- Entities ---

    def _open_column(self, line: ClassifiedLine) -> None:
        self._finalize_task()
        if self.column is not None:
            self.board.columns.append(self.column)
        self.column = Column(title=line.value, archived=line.archived)

    def _open_task(self, line: ClassifiedLine) -> None:
        self._finalize_task()
        if self.column is None:
            logger.debug("Dropping task outside any column: %r", line.value)
            return
        task_id = line.key or f"{PLACEHOLDER_PREFIX}{generate_token()}"
        self.task = Task(id=task_id, title=line.value)
        self.collecting_description = True
        self.metadata_allowed = True

    def _finalize_task(self) -> None:
        task = self.task
        if task is not None and self.column is not None:
            description = "\n".join(self.description).strip()
            task.description = description or None
            self.column.tasks.append(task)
        self._reset_task_state()

    def _reset_task_state(self) -> None:
        self.task = None
        self.description = []
        self.pending_blanks = 0
        self.in_legacy_fence = False
        self.legacy_task = False
        self.metadata_allowed = False
        self.collecting_description = False
        self.legacy_description = False
        self.active_list = None
        self.active_list_legacy = False

    # --- Task body ---

    def _append_description(self, text: str) -> None:
        if self.pending_blanks and self.description:
            self.description.extend([""] * self.pending_blanks)
        self.pending_blanks = 0
        self.description.append(text)

    def _end_description(self) -> None:
        self.collecting_description = False
        self.legacy_description = False
        self.metadata_allowed = False
        self.pending_blanks = 0

    def _apply_metadata(self, value: str) -> None:
        """Apply a "> tag1, tag2 | priority" line."""
        task = self.task
        if task is None:
            return
        segments = value.split("|")
        task.tags = [tag.strip() for tag in segments[0].split(",") if tag.strip()]
        if len(segments) > 1:
            priority = Priority.lookup(segments[1])
            if priority is not None:
                task.priority = priority
        self.metadata_allowed = False
        self.collecting_description = True
        self.active_list = None

    def _apply_section(self, key: str, value: str) -> None:
        """Apply a bold section header such as **Steps:** or **Files:** value."""
        task = self.task
        if task is None:
            return
        self._end_description()
        self.active_list = None
        self.active_list_legacy = False

        if key in CHECKLIST_KEYS:
            self.active_list = ChecklistKey(key)
            task.ensure_checklist(self.active_list)
        elif key == "files":
            task.files = value or None
        elif key == "due":
            task.due_date = value or None
        elif key == "workload":
            workload = Workload.lookup(value)
            if workload is not None:
                task.workload = workload
        elif key == "expanded":
            task.default_expanded = value.lower() == "true"

    def _add_checklist_item(self, line: ClassifiedLine) -> None:
        if self.task is None or self.active_list is None:
            return
        items = self.task.ensure_checklist(self.active_list)
        items.append(ChecklistItem(text=line.value, completed=line.completed))

    def _apply_property(self, key: str, value: str) -> None:
        """Apply a legacy "  - key: value" property line."""
        task = self.task
        if task is None:
            return
        self._end_description()
        self.legacy_task = True
        self.active_list = None
        self.active_list_legacy = False

        if key == "id":
            if value:
                task.id = value
        elif key == "due":
            task.due_date = value or None
        elif key == "tags":
            match = LEGACY_TAGS_RE.search(value)
            if match:
                task.tags = [tag.strip() for tag in match.group(1).split(",") if tag.strip()]
        elif key == "priority":
            priority = Priority.lookup(value)
            if priority is not None:
                task.priority = priority
        elif key == "workload":
            workload = Workload.lookup(value)
            if workload is not None:
                task.workload = workload
        elif key == "defaultExpanded":
            task.default_expanded = value.lower() == "true"
        elif key in CHECKLIST_KEYS:
            self.active_list = ChecklistKey(key)
            self.active_list_legacy = True
            setattr(task, key, [])
        elif key == "files":
            task.files = value or None
        elif key == "desc":
            self.legacy_description = True
            if value:
                self._append_description(value)

    def _toggle_legacy_fence(self) -> None:
        self.in_legacy_fence = not self.in_legacy_fence
        self._end_description()
        self.active_list = None
        self.active_list_legacy = False
