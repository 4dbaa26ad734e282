"""Task domain model."""

import re
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from .enums import ChecklistKey, Priority, Workload

# Canonical id written by the serializer, e.g. "TSK_12"
CANONICAL_ID_RE = re.compile(r"^TSK_\d+$")
# Ids accepted on read, including the legacy "TSK-12" spelling
ACCEPTED_ID_RE = re.compile(r"^TSK[_-](\d+)$")

# Stripped, never blank
TaskTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ChecklistItem(BaseModel):
    """A single entry in a steps, AC or verify checklist."""

    text: str
    completed: bool = False


class Task(BaseModel):
    """Represents a single task card on the board."""

    # Task identification
    id: str  # "TSK_12" once allocated, a "tmp-..." placeholder while parsing
    title: TaskTitle

    # Body
    description: str | None = None  # Free text, newlines preserved
    tags: list[str] = Field(default_factory=list)
    priority: Priority | None = None
    workload: Workload | None = None
    due_date: str | None = None  # Opaque, never parsed as a date
    default_expanded: bool = False

    # Checklists: None means never referenced, [] means present but empty
    steps: list[ChecklistItem] | None = None
    ac: list[ChecklistItem] | None = None
    verify: list[ChecklistItem] | None = None

    files: str | None = None  # May hold markdown links, rendered elsewhere

    @property
    def has_canonical_id(self) -> bool:
        """True when the id is in the TSK_<n> form the serializer writes."""
        return bool(CANONICAL_ID_RE.match(self.id))

    def checklist(self, key: ChecklistKey | str) -> list[ChecklistItem] | None:
        """Get a checklist by key ("steps", "ac" or "verify")."""
        return getattr(self, ChecklistKey(key).value)

    def ensure_checklist(self, key: ChecklistKey | str) -> list[ChecklistItem]:
        """Get a checklist by key, creating an empty one if absent."""
        name = ChecklistKey(key).value
        items = getattr(self, name)
        if items is None:
            items = []
            setattr(self, name, items)
        return items


def canonicalize_id(task_id: str) -> str | None:
    """
    Convert an accepted task id to canonical form.

    Example: "TSK-7" -> "TSK_7", "TSK_7" -> "TSK_7", "abc" -> None
    """
    match = ACCEPTED_ID_RE.match(task_id)
    if match is None:
        return None
    return f"TSK_{match.group(1)}"


class TaskDraft(BaseModel):
    """
    User-supplied task fields for add/edit requests.

    Only fields explicitly set on the draft are applied when editing.
    """

    title: TaskTitle
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    priority: Priority | None = None
    workload: Workload | None = None
    due_date: str | None = None
    default_expanded: bool = False
    steps: list[ChecklistItem] | None = None
    ac: list[ChecklistItem] | None = None
    verify: list[ChecklistItem] | None = None
    files: str | None = None

    def to_task(self, task_id: str) -> Task:
        """Build a new Task with the given id."""
        return Task(id=task_id, **self.model_dump())

    def apply_to(self, task: Task) -> None:
        """Overwrite the task fields that were set on this draft."""
        for name in self.model_fields_set:
            value = getattr(self, name)
            if isinstance(value, list):
                value = [item.model_copy() if isinstance(item, BaseModel) else item for item in value]
            setattr(task, name, value)
