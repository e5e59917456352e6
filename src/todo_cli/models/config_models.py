"""Configuration models for Todo CLI."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class StoreConfig(BaseModel):
    """Task store configuration."""

    path: str | None = Field(
        default=None, description="Task file path (defaults to the user data dir)"
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class OutputFormat(str, Enum):
    """Output formats for read commands."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default=OutputFormat.TABLE)
    color: bool = Field(default=True)
    date_format: str = Field(default="%Y-%m-%d")


class AppConfig(BaseModel):
    """Main Todo CLI configuration"""

    store: StoreConfig = Field(default_factory=StoreConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
