"""Service layer for business logic."""

from .board_service import BoardService
from .config_service import ConfigService
from .document_service import DocumentService

__all__ = [
    "BoardService",
    "ConfigService",
    "DocumentService",
]
