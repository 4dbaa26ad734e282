"""Format command: rewrite a board document in canonical form."""

import logging

from ..document import normalize_newlines, parse, serialize
from ..models import TaskHeaderStyle
from ..repositories import DocumentRepositoryProtocol
from .output import error, info, success

logger = logging.getLogger(__name__)


def run_format(
    repository: DocumentRepositoryProtocol,
    header_style: TaskHeaderStyle,
    check: bool = False,
) -> int:
    """
    Canonicalize the document, or only report whether it is canonical.

    Returns:
        Exit code (0 = canonical or rewritten, 1 = missing or not canonical)
    """
    if not repository.exists():
        error("Document not found")
        return 1

    original = repository.read()
    formatted = serialize(parse(original), header_style)

    if normalize_newlines(original) == formatted:
        info("Document is already canonical")
        return 0

    if check:
        error("Document is not in canonical form")
        return 1

    repository.write(formatted)
    logger.info("Rewrote document in canonical form")
    success("Document rewritten in canonical form")
    return 0
