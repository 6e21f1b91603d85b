"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from motominder.domain.motorcycles.entities import AuthorizationRole

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name used in logs and the CLI.
        version: Current library version string.
        debug: Enable debug logging regardless of log_level.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        write_role: Role required to insert, update or delete motorcycles.
        read_role: Role required to list or get motorcycles.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "MotoMinder"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    write_role: AuthorizationRole = AuthorizationRole.ADMIN
    read_role: AuthorizationRole = AuthorizationRole.USER

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("write_role", "read_role", mode="before")
    @classmethod
    def _normalize_role(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def effective_log_level(self) -> str:
        """Return DEBUG when debug mode is on, otherwise log_level."""
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
