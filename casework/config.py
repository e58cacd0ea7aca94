"""Configuration loading for the Casework execution engine.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Variables are prefixed with
    ``CASEWORK_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CASEWORK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Execution configuration
    always_run_teardown: bool = Field(
        default=True,
        description="Run teardown methods even when the wrapped action fails",
    )
    invocation_mode: Literal["dispatch", "reflective"] = Field(
        default="dispatch",
        description="How fixture methods are invoked",
    )
    candidate_modules: list[str] = Field(
        default_factory=list,
        description="Importable modules whose classes form the candidate pool",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("candidate_modules")
    @classmethod
    def validate_candidate_modules(cls, v: list[str]) -> list[str]:
        """Ensure module names are non-blank."""
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("candidate_modules must not contain blank names")
        return cleaned


def load_settings(env_file: str | None = None) -> Settings:
    """Load engine settings from environment.

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
