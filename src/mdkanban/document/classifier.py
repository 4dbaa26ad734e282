"""Line classification for board documents.

Every physical line is assigned exactly one ``LineRole``. Both task body
dialects are recognised by the same ordered checks, first match wins:

1.  HTML comment line (``<!-- ... -->``)
2.  Code fence (a line starting with three backticks). Lines inside a fence
    are ignored. Inside a legacy task body, an indented ````md`` fence opens
    a description block instead.
3.  Document title (``# ``), first occurrence only
4.  Column header (``## ``), optional ``[Archived]`` suffix
5.  Task header (``### `` or a non-indented ``- ``), excluding checklist items
    and legacy property lines
6.  Blockquote metadata (``> tags | priority``), first one in a task body
7.  Bold section header (``**Steps:**``, ``**AC:**``, ``**Verify:**``,
    ``**Files:**``, ``**Due:**``, ``**Workload:**``, ``**Expanded:**``)
8.  Checklist item under a bold section header
9.  Legacy property (``  - key: value``)
10. Legacy checklist item (6+ spaces) under a legacy checklist property
11. Image (``![alt](path)``)
12. Blank line
13. Description text while collecting a description
14. Legacy description continuation (4+ spaces) after ``desc:``
15. Anything else: a boundary inside a task body, ignored outside one
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..models import ChecklistKey

COUNTER_RE = re.compile(r"<!--\s*next-id:\s*(\d+)\s*-->")

LEGACY_KEYS = (
    "id",
    "due",
    "tags",
    "priority",
    "workload",
    "steps",
    "defaultExpanded",
    "desc",
    "ac",
    "verify",
    "files",
)
SECTION_KEYS = ("steps", "ac", "verify", "files", "due", "workload", "expanded")

ARCHIVED_SUFFIX = "[Archived]"
ARCHIVED_SUFFIX_RE = re.compile(r"\s*\[Archived\]$")
HEADER_ID_RE = re.compile(r"^(TSK[_-]\d+)\s+(\S.*)$")
CHECKLIST_RE = re.compile(r"^\s*- \[([ xX])\]\s*(.*)$")
LEGACY_CHECKLIST_RE = re.compile(r"^\s{6,}- \[([ xX])\]\s*(.*)$")
PROPERTY_RE = re.compile(r"^\s*- (" + "|".join(LEGACY_KEYS) + r"):\s*(.*)$")
SECTION_RE = re.compile(r"^\*\*(" + "|".join(SECTION_KEYS) + r"):\*\*\s*(.*)$", re.IGNORECASE)
LEGACY_FENCE_RE = re.compile(r"^\s+```md")
LEGACY_FENCED_INDENT_RE = re.compile(r"^\s{4,}")
IMAGE_RE = re.compile(r"^!\[.*\]\(.*\)")
CONTINUATION_RE = re.compile(r"^\s{4,}\S")


class LineRole(Enum):
    """Syntactic role of a single document line."""

    COMMENT = "comment"
    FENCE = "fence"
    FENCED = "fenced"
    LEGACY_FENCE = "legacy_fence"
    LEGACY_FENCED = "legacy_fenced"
    DOCUMENT_TITLE = "document_title"
    COLUMN_HEADER = "column_header"
    TASK_HEADER = "task_header"
    METADATA = "metadata"
    SECTION_HEADER = "section_header"
    CHECKLIST_ITEM = "checklist_item"
    LEGACY_PROPERTY = "legacy_property"
    LEGACY_CHECKLIST_ITEM = "legacy_checklist_item"
    IMAGE = "image"
    DESCRIPTION = "description"
    LEGACY_CONTINUATION = "legacy_continuation"
    BLANK = "blank"
    BOUNDARY = "boundary"
    IGNORED = "ignored"


@dataclass(frozen=True)
class LineContext:
    """The slice of parser state the classifier needs."""

    in_fence: bool = False
    in_legacy_fence: bool = False
    has_title: bool = False
    in_task: bool = False
    legacy_task: bool = False  # Task body has used legacy property syntax
    metadata_allowed: bool = False
    collecting_description: bool = False
    legacy_description: bool = False
    active_list: ChecklistKey | None = None
    active_list_legacy: bool = False


@dataclass(frozen=True)
class ClassifiedLine:
    """A line tagged with its role and the payload extracted from it."""

    role: LineRole
    value: str = ""
    key: str | None = None  # Property/section key, or a task id from a header
    completed: bool = False  # Checklist items
    archived: bool = False  # Column headers


def classify(line: str, context: LineContext) -> ClassifiedLine:
    """Classify one line given the current parse context."""
    trimmed = line.strip()

    if context.in_legacy_fence:
        if trimmed == "```":
            return ClassifiedLine(LineRole.LEGACY_FENCE)
        return ClassifiedLine(LineRole.LEGACY_FENCED, LEGACY_FENCED_INDENT_RE.sub("", line))

    if trimmed.startswith("<!--") and trimmed.endswith("-->"):
        return ClassifiedLine(LineRole.COMMENT)

    if context.in_task and context.legacy_task and LEGACY_FENCE_RE.match(line):
        return ClassifiedLine(LineRole.LEGACY_FENCE)
    if trimmed.startswith("```"):
        return ClassifiedLine(LineRole.FENCE)
    if context.in_fence:
        return ClassifiedLine(LineRole.FENCED)

    if trimmed.startswith("# ") and not context.has_title:
        return ClassifiedLine(LineRole.DOCUMENT_TITLE, trimmed[2:].strip())

    if trimmed.startswith("## "):
        title = trimmed[3:].strip()
        archived = title.endswith(ARCHIVED_SUFFIX)
        if archived:
            title = ARCHIVED_SUFFIX_RE.sub("", title).strip()
        return ClassifiedLine(LineRole.COLUMN_HEADER, title, archived=archived)

    header_text = _task_header_text(line, trimmed)
    if header_text:
        match = HEADER_ID_RE.match(header_text)
        if match:
            return ClassifiedLine(LineRole.TASK_HEADER, match.group(2).strip(), key=match.group(1))
        return ClassifiedLine(LineRole.TASK_HEADER, header_text)

    if not context.in_task:
        if not trimmed:
            return ClassifiedLine(LineRole.BLANK)
        return ClassifiedLine(LineRole.IGNORED)

    return _classify_task_body(line, trimmed, context)


def _task_header_text(line: str, trimmed: str) -> str:
    """Return the header text if the line is a task header, else ""."""
    if trimmed.startswith("### "):
        return trimmed[4:].strip()
    if line.startswith("- ") and not (CHECKLIST_RE.match(line) or PROPERTY_RE.match(line)):
        return trimmed[2:].strip()
    return ""


def _classify_task_body(line: str, trimmed: str, context: LineContext) -> ClassifiedLine:
    """Classify a line inside an open task (rules 6-15)."""
    if context.metadata_allowed and trimmed.startswith(">"):
        return ClassifiedLine(LineRole.METADATA, trimmed[1:].strip())

    section = SECTION_RE.match(trimmed)
    if section:
        return ClassifiedLine(
            LineRole.SECTION_HEADER, section.group(2).strip(), key=section.group(1).lower()
        )

    if context.active_list is not None and not context.active_list_legacy:
        item = CHECKLIST_RE.match(line)
        if item:
            return _checklist_line(LineRole.CHECKLIST_ITEM, item)

    prop = PROPERTY_RE.match(line)
    if prop:
        return ClassifiedLine(LineRole.LEGACY_PROPERTY, prop.group(2).strip(), key=prop.group(1))

    if context.active_list is not None and context.active_list_legacy:
        item = LEGACY_CHECKLIST_RE.match(line)
        if item:
            return _checklist_line(LineRole.LEGACY_CHECKLIST_ITEM, item)

    if IMAGE_RE.match(trimmed):
        return ClassifiedLine(LineRole.IMAGE, trimmed)

    if not trimmed:
        return ClassifiedLine(LineRole.BLANK)

    if context.collecting_description and context.active_list is None:
        return ClassifiedLine(LineRole.DESCRIPTION, line.rstrip())

    if context.legacy_description and CONTINUATION_RE.match(line):
        return ClassifiedLine(LineRole.LEGACY_CONTINUATION, trimmed)

    return ClassifiedLine(LineRole.BOUNDARY)


def _checklist_line(role: LineRole, match: re.Match[str]) -> ClassifiedLine:
    return ClassifiedLine(role, match.group(2).strip(), completed=match.group(1) in "xX")
