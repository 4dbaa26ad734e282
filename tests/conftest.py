"""Shared fixtures and sample documents."""

import pytest

# Already canonical: serialize(parse(text)) must reproduce it byte for byte
CANONICAL_DOCUMENT = """\
<!-- next-id: 5 -->
# My Board

## Todo

### TSK_1 Draft roadmap
> backend, urgent | high

This needs doing.

Second paragraph.

**Due:** 2024-05-01
**Workload:** Hard
**Expanded:** true
**Steps:**
- [x] outline
- [ ] write
**AC:**
- [ ] reviewed
**Files:** [roadmap](docs/roadmap.md)

### TSK_2 Plain task

### TSK_3 Only priority
> | low

## Done [Archived]

### TSK_4 Shipped
**Verify:**
- [x] deployed

"""

LEGACY_DOCUMENT = """\
# Legacy Board

## Todo

- Draft roadmap
  - due: 2024-05-01
  - tags: [backend, urgent]
  - priority: high
  - workload: Hard
  - steps:
      - [x] outline
      - [ ] write
  - desc: This needs doing.
    Second line.
- Second task
  - id: TSK-7
  - defaultExpanded: true
"""

NEW_DIALECT_EQUIVALENT = """\
# Legacy Board

## Todo

### Draft roadmap
> backend, urgent | high

This needs doing.
Second line.

**Due:** 2024-05-01
**Workload:** Hard
**Steps:**
- [x] outline
- [ ] write

### TSK_7 Second task
**Expanded:** true
"""


@pytest.fixture
def canonical_document() -> str:
    return CANONICAL_DOCUMENT


@pytest.fixture
def legacy_document() -> str:
    return LEGACY_DOCUMENT


@pytest.fixture
def new_dialect_equivalent() -> str:
    return NEW_DIALECT_EQUIVALENT
