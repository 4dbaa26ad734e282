"""Repository layer for document access."""

from .markdown_file import MarkdownFileRepository
from .protocol import DocumentRepositoryProtocol

__all__ = [
    "DocumentRepositoryProtocol",
    "MarkdownFileRepository",
]
