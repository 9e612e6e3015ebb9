"""
Centralized configuration for pageorder.

Uses Pydantic BaseSettings for environment variable integration
and validation. All configurable values should be defined here.

Configuration sources (in order of precedence):
1. Explicit constructor arguments
2. Environment variables (PAGEORDER_*)
3. .env file
4. Default values

Example:
    from pageorder.config import get_config

    config = get_config()
    print(config.rule_separator)  # From PAGEORDER_RULE_SEPARATOR or "|"

    # Override at runtime
    config = get_config(log_format="text")
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PageOrderConfig(BaseSettings):
    """
    Central configuration for pageorder.

    All settings can be overridden via environment variables
    prefixed with PAGEORDER_.

    Example:
        export PAGEORDER_LOG_LEVEL=debug
        export PAGEORDER_UPDATE_SEPARATOR=";"
    """

    model_config = SettingsConfigDict(
        env_prefix="PAGEORDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = Field(
        default="pageorder",
        description="Service name attached to structured log events",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        description="Logging level for pageorder",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format (json for log shippers, text for console)",
    )

    # Puzzle text format
    rule_separator: str = Field(
        default="|",
        description="Separator between the two pages of an ordering rule line",
    )
    update_separator: str = Field(
        default=",",
        description="Separator between pages of an update line",
    )

    # Telemetry
    emit_span_events: bool = Field(
        default=True,
        description="Record validation results as events on the current OTel span",
    )

    @field_validator("rule_separator", "update_separator")
    @classmethod
    def non_empty_separator(cls, v: str) -> str:
        """Separators must contain at least one non-whitespace character."""
        if not v.strip():
            raise ValueError("separator must not be blank")
        return v.strip()

    @model_validator(mode="after")
    def distinct_separators(self) -> "PageOrderConfig":
        if self.rule_separator == self.update_separator:
            raise ValueError("rule_separator and update_separator must differ")
        return self


# Global singleton
_config: Optional[PageOrderConfig] = None


def get_config(**overrides) -> PageOrderConfig:
    """
    Get the global configuration instance.

    Creates a singleton on first call. Subsequent calls return
    the same instance unless overrides are provided.

    Args:
        **overrides: Override any config values

    Returns:
        PageOrderConfig instance
    """
    global _config

    if overrides or _config is None:
        _config = PageOrderConfig(**overrides)

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


def get_log_level() -> str:
    """Get the configured log level."""
    return get_config().log_level
