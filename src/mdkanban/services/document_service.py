"""Service tying the board document to a live, mutable board."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..document import parse, serialize
from ..models import Board, KanbanConfig
from ..repositories import DocumentRepositoryProtocol

if TYPE_CHECKING:
    from .config_service import ConfigService

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Owns the live board for one open document.

    Every mutation is applied in memory and immediately followed by a full
    re-serialize and write. Change notifications that arrive within the
    self-save window after our own write are ignored, so a reparse does not
    replace the live board (and its generated ids) mid-edit.
    """

    def __init__(
        self,
        repository: DocumentRepositoryProtocol,
        config_service: ConfigService | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.repository = repository
        self._config_service = config_service
        self._clock = clock
        self._board: Board | None = None
        self._load_error: str | None = None
        self._last_self_save: float | None = None

    def _get_config(self) -> KanbanConfig:
        """Get config, using default if no config service."""
        if self._config_service:
            return self._config_service.get_config()
        return KanbanConfig.default()

    @property
    def board(self) -> Board:
        """The live board, loading the document on first access."""
        if self._board is None:
            return self.load()
        return self._board

    @property
    def load_error(self) -> str | None:
        """Message from the last failed load, if any."""
        return self._load_error

    def load(self) -> Board:
        """
        Parse the document, replacing the live board wholesale.

        An unexpected failure replaces the board with an empty error
        placeholder rather than leaving a partial board.
        """
        self._load_error = None
        try:
            board = parse(self.repository.read())
        except Exception as e:
            self._load_error = f"Kanban parsing error: {e}"
            logger.exception("Failed to parse board document")
            board = Board.error_placeholder()
        self._board = board
        return board

    def on_external_change(self) -> bool:
        """
        React to the document changing on disk.

        Returns True if the board was reloaded, False if the change was
        attributed to our own recent save.
        """
        if self._within_self_save_window():
            logger.debug("Ignoring change notification inside self-save window")
            return False
        self.load()
        return True

    def perform(self, action: Callable[[Board], object]) -> Board:
        """
        Apply a mutation to the live board, then save the document.

        While the last load failed the live board is only a placeholder, so
        the action is not applied and nothing is written.
        """
        board = self.board
        if self._load_error is not None:
            logger.warning("Ignoring edit, board failed to load: %s", self._load_error)
            return board
        action(board)
        self.save()
        return board

    def save(self) -> bool:
        """Serialize the live board and write it back. Returns False if refused."""
        board = self.board
        if self._load_error is not None:
            logger.warning("Not saving over a document that failed to load")
            return False
        config = self._get_config()
        text = serialize(board, config.task_header)
        self._last_self_save = self._clock()
        self.repository.write(text)
        logger.info("Board saved (next_id=%d)", board.next_id)
        return True

    def _within_self_save_window(self) -> bool:
        if self._last_self_save is None:
            return False
        window = self._get_config().self_save_window
        return self._clock() - self._last_self_save < window
