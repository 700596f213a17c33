"""Configuration models for ToDoLy."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .core import SortKey


class AppConfig(BaseModel):
    """Main application configuration."""

    data_file: str | None = Field(
        default=None, description="Task file path (None: platform data dir)"
    )
    default_sort: SortKey = Field(default=SortKey.DUE_DATE)
    soon_days: int = Field(
        default=2, ge=0, description="Open tasks due within this many days are highlighted"
    )
    color: bool = Field(default=True)
