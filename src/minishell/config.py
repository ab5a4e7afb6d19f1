"""Configuration management for minishell."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MINISHELL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default="$ ", description="Prompt written before each input line")
    complete_builtins: bool = Field(default=True, description="Offer builtin names on tab in a terminal")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: Literal["default", "rich"] = Field(default="default", description="Log format")


def get_settings(**overrides: Any) -> Settings:
    """Get application settings and configure logging from them.

    Args:
        **overrides: Explicit values taking precedence over environment and ``.env``

    Returns:
        Settings instance
    """
    settings = Settings(**{key: value for key, value in overrides.items() if value is not None})

    configure_logging(level=settings.log_level, profile=settings.log_format)

    return settings
