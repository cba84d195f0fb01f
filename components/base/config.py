"""
Base configuration class for all components.

Uses pydantic-settings for environment variable loading.
Each component extends this with its own settings.
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field


class ComponentConfig(BaseSettings):
    """
    Base configuration for all component services.

    Settings are loaded from:
    1. Environment variables
    2. .env file (if present)
    3. Default values

    Subclasses should override model_config to set env_prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Vocabulary, read from TAXONOMY for every component
    taxonomy: str = Field(
        default="campus",
        validation_alias=AliasChoices("taxonomy", "TAXONOMY"),
        description="Bundled taxonomy name (campus, civic) or path to a taxonomy YAML file",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    def validate_required(self, *fields: str) -> None:
        """
        Validate that required fields are set.

        Args:
            *fields: Field names to validate

        Raises:
            ConfigurationError: If any required field is missing
        """
        from components.base.exceptions import ConfigurationError

        missing = []
        for field in fields:
            value = getattr(self, field, None)
            if value is None or value == "":
                missing.append(field)

        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                component=self.__class__.__name__,
                missing_keys=missing,
            )


def resolve_log_level(level: Optional[str]) -> str:
    """Normalize a log level name, falling back to INFO for unknown values."""
    if not level:
        return "INFO"
    level = level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return "INFO"
    return level
