"""Configuration service for ToDoLy.

The ConfigService is the single source of truth for configuration. It
handles:

- Loading and saving config.json in the platform config directory
- Resolving which task file a command should operate on
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

from todoly.models.config_models import AppConfig

DATA_FILE_ENV = "TODOLY_DATA_FILE"
DEFAULT_DATA_FILE = "tasks.json"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("todoly"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("todoly"))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: write the defaults so the user has a file to edit
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    @property
    def default_data_file(self) -> Path:
        return self.data_dir / DEFAULT_DATA_FILE

    def resolve_data_file(self, override: str | Path | None = None) -> Path:
        """Pick the task file.

        Precedence: explicit override, then $TODOLY_DATA_FILE, then
        ``data_file`` from config.json, then the platform data directory.
        """
        if override:
            return Path(override).expanduser()
        env_value = os.environ.get(DATA_FILE_ENV)
        if env_value:
            return Path(env_value).expanduser()
        if self.config.data_file:
            return Path(self.config.data_file).expanduser()
        return self.default_data_file


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
