"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    project_root: Path = Field(
        default=Path(),
        description="Path to project root containing mdkanban.yml",
    )

    document: Path | None = Field(
        default=None,
        description="Board document; relative paths resolve against project_root",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "MDKANBAN_",
    }

    def resolve_document(self, configured: str) -> Path:
        """Path of the board document, falling back to the configured name."""
        document = self.document if self.document is not None else Path(configured)
        if document.is_absolute():
            return document
        return self.project_root / document
