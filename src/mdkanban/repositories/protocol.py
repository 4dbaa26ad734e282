"""Repository protocol for board document storage."""

from typing import Protocol


class DocumentRepositoryProtocol(Protocol):
    """Interface for wherever the board document text lives.

    The board is persisted by rewriting the whole document, so the
    contract is whole-text read and write.
    """

    def exists(self) -> bool:
        """Check whether the document exists yet."""
        ...

    def read(self) -> str:
        """Read the full document text.

        Returns:
            The document text, or an empty string if it does not exist.
        """
        ...

    def write(self, text: str) -> None:
        """Replace the full document text.

        Args:
            text: The new document text.
        """
        ...
