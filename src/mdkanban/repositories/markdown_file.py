"""Filesystem-based repository for the board document."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class MarkdownFileRepository:
    """
    Repository for a board stored as a single markdown file.

    Text is read and written as UTF-8. Line endings are left alone here;
    the parser normalizes them and the serializer only writes \\n.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Path to the board document (e.g., kanban.md)
        """
        self.path = path

    def exists(self) -> bool:
        """Check whether the document file exists."""
        return self.path.is_file()

    def read(self) -> str:
        """Read the document, or return "" if it does not exist yet."""
        if not self.exists():
            logger.debug("Document not found, starting empty: %s", self.path)
            return ""
        with self.path.open(encoding="utf-8", newline="") as f:
            return f.read()

    def write(self, text: str) -> None:
        """Write the document, creating parent directories if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        logger.debug("Wrote %d characters to %s", len(text), self.path)
