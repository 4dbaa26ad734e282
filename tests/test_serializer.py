"""Tests for serializing boards and the round-trip contract."""

import pytest

from mdkanban.document import parse, serialize
from mdkanban.models import (
    Board,
    ChecklistItem,
    Column,
    Priority,
    Task,
    TaskHeaderStyle,
    Workload,
)


def shape(board: Board) -> tuple:
    """Everything except generated column ids."""
    return (
        board.title,
        board.next_id,
        [
            (c.title, c.archived, [t.model_dump() for t in c.tasks])
            for c in board.columns
        ],
    )


@pytest.fixture
def full_board() -> Board:
    return Board(
        title="Project",
        next_id=4,
        columns=[
            Column(
                title="Doing",
                tasks=[
                    Task(
                        id="TSK_1",
                        title="Build parser",
                        description="First line.\n\n  Indented second.",
                        tags=["core", "parser"],
                        priority=Priority.MEDIUM,
                        workload=Workload.NORMAL,
                        due_date="2024-06-30",
                        default_expanded=True,
                        steps=[
                            ChecklistItem(text="classify", completed=True),
                            ChecklistItem(text="state machine"),
                        ],
                        ac=[ChecklistItem(text="round trips")],
                        verify=[ChecklistItem(text="tests pass", completed=True)],
                        files="[parser](src/parser.py)",
                    ),
                    Task(id="TSK_2", title="Bare"),
                ],
            ),
            Column(title="Old", archived=True, tasks=[Task(id="TSK_3", title="Gone", tags=["x"])]),
        ],
    )


class TestSerialize:
    """Tests for the emitted text."""

    def test_counter_first(self):
        """The counter comment is always the first line."""
        text = serialize(Board(next_id=7))

        assert text == "<!-- next-id: 7 -->\n"

    def test_title_and_columns(self):
        """Title and column headers with blank separators."""
        board = Board(title="B", columns=[Column(title="Todo"), Column(title="Done", archived=True)])

        assert serialize(board) == (
            "<!-- next-id: 1 -->\n# B\n\n## Todo\n\n## Done [Archived]\n\n"
        )

    def test_task_emission_order(self):
        """Header, metadata, description, sections, trailing blank."""
        task = Task(
            id="TSK_1",
            title="Draft roadmap",
            tags=["backend", "urgent"],
            priority=Priority.HIGH,
            description="This needs doing.",
            due_date="2024-05-01",
            workload=Workload.HARD,
            steps=[ChecklistItem(text="outline", completed=True), ChecklistItem(text="write")],
            files="notes.md",
        )
        board = Board(next_id=2, columns=[Column(title="Todo", tasks=[task])])

        assert serialize(board) == (
            "<!-- next-id: 2 -->\n"
            "## Todo\n"
            "\n"
            "### TSK_1 Draft roadmap\n"
            "> backend, urgent | high\n"
            "\n"
            "This needs doing.\n"
            "\n"
            "**Due:** 2024-05-01\n"
            "**Workload:** Hard\n"
            "**Steps:**\n"
            "- [x] outline\n"
            "- [ ] write\n"
            "**Files:** notes.md\n"
            "\n"
        )

    def test_list_header_style(self):
        """'list' only changes the header marker."""
        task = Task(id="TSK_1", title="T", tags=["a"])
        board = Board(columns=[Column(title="C", tasks=[task])])

        heading = serialize(board, TaskHeaderStyle.HEADING)
        listed = serialize(board, "list")

        assert "### TSK_1 T\n" in heading
        assert "- TSK_1 T\n" in listed
        assert heading.replace("### TSK_1 T", "- TSK_1 T") == listed

    def test_non_canonical_id_omitted(self):
        """Only TSK_<n> ids are written into headers."""
        board = Board(columns=[Column(title="C", tasks=[Task(id="tmp-abc", title="T")])])

        assert "### T\n" in serialize(board)
        assert "tmp-abc" not in serialize(board)

    def test_empty_and_absent_checklists_both_omitted(self):
        """An empty checklist is not written, exactly like an absent one."""
        empty = Task(id="TSK_1", title="T", steps=[], ac=[], verify=[])
        absent = Task(id="TSK_1", title="T")

        def render(task: Task) -> str:
            return serialize(Board(columns=[Column(title="C", tasks=[task])]))

        assert render(empty) == render(absent)
        assert "**Steps:**" not in render(empty)

    def test_metadata_variants(self):
        """Tags only, priority only, or neither."""

        def render(**fields) -> str:
            task = Task(id="TSK_1", title="T", **fields)
            return serialize(Board(columns=[Column(title="C", tasks=[task])]))

        assert "> a, b\n" in render(tags=["a", "b"])
        assert "> | low\n" in render(priority=Priority.LOW)
        assert "\n>" not in render()

    def test_whitespace_only_description_omitted(self):
        """Blank descriptions are not written."""
        task = Task(id="TSK_1", title="T", description="  \n ")
        text = serialize(Board(columns=[Column(title="C", tasks=[task])]))

        assert text.endswith("### TSK_1 T\n\n")


class TestRoundTrip:
    """Tests for parse/serialize round trips."""

    def test_canonical_text_is_stable(self, canonical_document: str):
        """Canonical text survives parse + serialize byte for byte."""
        assert serialize(parse(canonical_document)) == canonical_document

    def test_board_survives_round_trip(self, full_board: Board):
        """parse(serialize(b)) equals b apart from column ids."""
        assert shape(parse(serialize(full_board))) == shape(full_board)

    def test_board_survives_list_style_round_trip(self, full_board: Board):
        """The list header style round trips too."""
        text = serialize(full_board, TaskHeaderStyle.LIST)

        assert shape(parse(text)) == shape(full_board)

    def test_quoted_description_without_metadata(self):
        """A description opening with ">" is not mistaken for tags."""
        task = Task(id="TSK_1", title="T", description="> quoted note\nplain")
        board = Board(next_id=2, columns=[Column(title="C", tasks=[task])])

        text = serialize(board)
        reparsed = parse(text)

        assert "### TSK_1 T\n>\n\n> quoted note\n" in text
        assert shape(reparsed) == shape(board)
        assert reparsed.columns[0].tasks[0].tags == []
        assert serialize(reparsed) == text

    def test_bare_metadata_line_gives_no_tags(self):
        """A lone ">" is an empty metadata line."""
        task = parse("## C\n### TSK_1 T\n>\n").columns[0].tasks[0]

        assert task.tags == []
        assert task.priority is None
        assert task.description is None

    def test_id_like_title_kept_intact(self):
        """A title that starts like an id survives for an unallocated task."""
        board = Board(columns=[Column(title="C", tasks=[Task(id="abc", title="TSK_9 Foo")])])

        text = serialize(board)
        task = parse(text).columns[0].tasks[0]

        assert task.title == "TSK_9 Foo"
        assert task.id == "TSK_1"
        assert board.columns[0].tasks[0].id == "abc"
        assert board.next_id == 1

    def test_archived_round_trip(self):
        """'Done [Archived]' comes back exactly."""
        board = parse("## Done [Archived]\n")

        assert "## Done [Archived]\n" in serialize(board)

    def test_legacy_rewritten_as_new_dialect(self, legacy_document: str):
        """Legacy input is saved in the new dialect."""
        text = serialize(parse(legacy_document))

        assert "  - tags:" not in text
        assert "> backend, urgent | high" in text
        assert "### TSK_1 Draft roadmap" in text
        assert "### TSK_7 Second task" in text
        assert "**Expanded:** true" in text

    @pytest.mark.parametrize(
        "fixture_name", ["canonical_document", "legacy_document", "new_dialect_equivalent"]
    )
    def test_second_pass_is_identical(self, fixture_name: str, request: pytest.FixtureRequest):
        """serialize(parse(.)) applied twice gives the same text."""
        text = request.getfixturevalue(fixture_name)

        first = serialize(parse(text))
        second = serialize(parse(first))

        assert first == second

    def test_messy_document_normalizes(self):
        """Hand-edited spacing settles after one pass."""
        text = (
            "\r\n# Board\r\n## Col\r\n### A\r\n> t|high\r\n\r\n\r\n"
            "desc\r\n**steps:**\r\n- [X] x\r\nstray\r\n\r\n- B\r\n"
        )

        first = serialize(parse(text))

        assert first == serialize(parse(first))
        assert "> t | high\n" in first
        assert "- [x] x\n" in first
