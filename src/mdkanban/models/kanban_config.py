"""Configuration models for mdkanban.yml."""

from pydantic import BaseModel, Field, field_validator

from .enums import TaskHeaderStyle


class KanbanConfig(BaseModel):
    """Root configuration from mdkanban.yml."""

    version: int = 1
    document: str = Field(default="kanban.md", min_length=1)
    task_header: TaskHeaderStyle = TaskHeaderStyle.HEADING
    self_save_window: float = Field(default=1.5, ge=0)

    @field_validator("task_header", mode="before")
    @classmethod
    def resolve_header_alias(cls, v: object) -> object:
        """Accept the older "title" spelling for heading-style headers."""
        if isinstance(v, str) and v.strip().lower() == "title":
            return TaskHeaderStyle.HEADING
        return v

    @classmethod
    def default(cls) -> "KanbanConfig":
        """Return default configuration."""
        return cls()
