"""Unit tests for model edge cases."""

import pytest
from pydantic import ValidationError

from mdkanban.models import (
    Board,
    ChecklistItem,
    ChecklistKey,
    Column,
    Priority,
    Task,
    TaskDraft,
    Workload,
    canonicalize_id,
)


class TestCanonicalizeId:
    """Tests for canonicalize_id."""

    def test_canonical_passthrough(self):
        assert canonicalize_id("TSK_12") == "TSK_12"

    def test_legacy_hyphen(self):
        assert canonicalize_id("TSK-12") == "TSK_12"

    def test_other_ids(self):
        """Anything else is not an accepted id."""
        assert canonicalize_id("tmp-3f9a") is None
        assert canonicalize_id("TSK_") is None
        assert canonicalize_id("tsk_1") is None
        assert canonicalize_id("TSK_1 extra") is None


class TestEnums:
    """Tests for enum lookups."""

    def test_priority_lookup(self):
        assert Priority.lookup(" HIGH ") == Priority.HIGH
        assert Priority.lookup("urgent") is None

    def test_workload_lookup_normalizes_case(self):
        assert Workload.lookup("extreme") == Workload.EXTREME
        assert Workload.lookup("extreme").value == "Extreme"


class TestTask:
    """Tests for Task helpers."""

    def test_title_required(self):
        """Empty titles are rejected."""
        with pytest.raises(ValidationError):
            Task(id="TSK_1", title="")

    def test_whitespace_title_rejected(self):
        """A title of only spaces counts as empty."""
        with pytest.raises(ValidationError):
            Task(id="TSK_1", title="   ")
        with pytest.raises(ValidationError):
            TaskDraft(title=" \t")

    def test_title_is_stripped(self):
        assert Task(id="TSK_1", title="  Ship it ").title == "Ship it"

    def test_has_canonical_id(self):
        assert Task(id="TSK_1", title="T").has_canonical_id
        assert not Task(id="TSK-1", title="T").has_canonical_id

    def test_checklist_access(self):
        """checklist reads, ensure_checklist creates."""
        task = Task(id="TSK_1", title="T")

        assert task.checklist(ChecklistKey.AC) is None
        items = task.ensure_checklist("ac")
        assert items == []
        assert task.ac is items

    def test_unknown_checklist_key(self):
        with pytest.raises(ValueError):
            Task(id="TSK_1", title="T").checklist("notes")


class TestTaskDraft:
    """Tests for TaskDraft."""

    def test_to_task(self):
        """A draft becomes a task with the given id."""
        draft = TaskDraft(title="New", steps=[ChecklistItem(text="s")], workload="Easy")

        task = draft.to_task("TSK_3")

        assert task.id == "TSK_3"
        assert task.workload == Workload.EASY
        assert task.steps == [ChecklistItem(text="s")]

    def test_apply_to_copies_lists(self):
        """Applied checklists are not shared with the draft."""
        draft = TaskDraft(title="T", steps=[ChecklistItem(text="s")])
        task = Task(id="TSK_1", title="Old", ac=[ChecklistItem(text="a")])

        draft.apply_to(task)
        draft.steps[0].completed = True

        assert task.title == "T"
        assert task.steps == [ChecklistItem(text="s", completed=False)]
        assert task.ac == [ChecklistItem(text="a")]


class TestBoard:
    """Tests for Board helpers."""

    def test_find_task(self):
        task = Task(id="TSK_1", title="T")
        column = Column(title="C", tasks=[task])
        board = Board(columns=[column])

        assert board.find_task(column.id, "TSK_1") is task
        assert board.find_task(column.id, "TSK_2") is None
        assert board.find_task("missing", "TSK_1") is None

    def test_error_placeholder(self):
        board = Board.error_placeholder()

        assert board.title == "Error Loading Board"
        assert board.columns == []
        assert board.next_id == 1
