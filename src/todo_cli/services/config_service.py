"""Configuration service for managing Todo CLI configuration.

Handles:

- Loading and saving config.json under the user config dir
- Dotted-key get/set/reset (``output.format``, ``store.path``)
- Resolving which task file a command works on
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from todo_cli.models.config_models import AppConfig
from todo_cli.models.exceptions import ConfigError

_APP_NAME = "todo_cli"
DEFAULT_TASKS_FILE = "tasks.json"
_BOOL_WORDS = {"true": True, "yes": True, "on": True, "false": False, "no": False, "off": False}


def _coerce(value: str, current: Any) -> Any:
    """Convert a command-line string to the type of the value it replaces."""
    lowered = value.lower()
    if lowered in ("none", "null"):
        return None
    if isinstance(current, bool) and lowered in _BOOL_WORDS:
        return _BOOL_WORDS[lowered]
    if isinstance(current, int) and value.lstrip("-").isdigit():
        return int(value)
    return value


class ConfigService:
    """Service for managing application configuration.

    The config file is created with defaults the first time it is saved;
    reading a missing file simply yields the defaults.
    """

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

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
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run - defaults, written lazily on the first save
            self._config = AppConfig()
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load config {self.config_path}: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise ConfigError(f"Failed to save config {self.config_path}: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            ConfigError: If the key doesn't exist
        """
        return self._lookup(self.config, key)

    def set(self, key: str, value: Any) -> Any:
        """Set a configuration value by dot-separated key and save.

        String values are converted to the type of the current value.

        Returns:
            The value as stored after validation

        Raises:
            ConfigError: If the key doesn't exist or the value is invalid
        """
        current_value = self._lookup(self.config, key)
        if isinstance(value, str):
            value = _coerce(value, current_value)

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {value!r}") from e
        self.save_config()
        return self.get(key)

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return
        self.set(key, self._lookup(AppConfig(), key))

    def _lookup(self, config: AppConfig, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise ConfigError(f"Unknown configuration key '{key}'")
            value = getattr(value, k)
        if isinstance(value, BaseModel):
            raise ConfigError(f"'{key}' is a section, not a value")
        return value

    def resolve_store_path(self, override: str | Path | None = None) -> Path:
        """Pick the task file: explicit override, then config, then default."""
        if override:
            return Path(override).expanduser()
        if self.config.store.path:
            return Path(self.config.store.path).expanduser()
        return self.data_dir / DEFAULT_TASKS_FILE

    def to_dict(self) -> dict:
        return self.config.model_dump(mode="json")


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the shared ConfigService instance."""
    return ConfigService()

