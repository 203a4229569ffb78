"""Configuration loading for the cest test harness.

This module provides centralized configuration management:
- Load settings from CEST_* environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings

None of these settings select or filter tests; they only tune how the
run is logged and printed.
"""

import re
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MODULE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class Settings(BaseSettings):
    """Harness configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_prefix="CEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for harness diagnostics (written to stderr)",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Reporting
    color: bool = Field(
        default=True,
        description="Print ANSI color codes in the per-test and summary lines",
    )

    # Execution
    catch_exceptions: bool = Field(
        default=True,
        description="Count an exception raised by a test body as FAILURE "
        "instead of aborting the run",
    )

    # Test modules to import before running
    modules: str = Field(
        default="",
        description="Comma-separated dotted names of test modules to import",
    )

    @field_validator("modules")
    @classmethod
    def validate_modules(cls, v: str) -> str:
        """Ensure every listed module is a dotted Python identifier."""
        for module_name in (part.strip() for part in v.split(",")):
            if module_name and not _MODULE_NAME.match(module_name):
                raise ValueError(f"invalid module name: {module_name!r}")
        return v

    @property
    def module_names(self) -> list[str]:
        """Listed test modules in order, blanks dropped."""
        return [part.strip() for part in self.modules.split(",") if part.strip()]


def load_settings(env_file: str | None = None) -> Settings:
    """Load harness settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
