"""Environment-bound configuration objects.

This module provides Pydantic BaseSettings-based configuration loading from .env files.
Every group reads its own environment variables; the fetcher and server groups are
frozen so a single instance can be shared by concurrent tool calls.

Example:
    from solutionFinder.config.settings import get_settings

    settings = get_settings()  # Cached singleton
    url = settings.fetcher.source_url
    timeout = settings.fetcher.timeout
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


load_dotenv()

SHARED_SOLUTIONS_README = (
    "https://raw.githubusercontent.com/CodingChallengesFYI/SharedSolutions/refs/heads/main/README.md"
)


class FetcherSettings(BaseSettings):
    """Remote document source and request bounds.

    - source_url: markdown index of shared solutions (SOLUTIONS_SOURCE_URL)
    - timeout: wall-clock bound for one fetch in seconds (FETCH_TIMEOUT, default 15)
    - max_error_body_bytes: cap on error body kept for diagnostics (default 8 KiB)
    """

    source_url: str = Field(
        default=SHARED_SOLUTIONS_README,
        validation_alias=AliasChoices("SOLUTIONS_SOURCE_URL", "SOURCE_URL"),
    )
    timeout: float = Field(default=15.0, gt=0, le=120, alias="FETCH_TIMEOUT")
    max_error_body_bytes: int = Field(default=8 << 10, ge=0, alias="FETCH_MAX_ERROR_BODY")
    accept: str = Field(default="text/plain", alias="FETCH_ACCEPT")
    user_agent: str = Field(default="coding-challenges-mcp/1.0", alias="FETCH_USER_AGENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )


class ServerSettings(BaseSettings):
    """Tool registration metadata announced to the MCP host."""

    name: str = Field(default="Coding Challenges Solutions", alias="SERVER_NAME")
    version: str = Field(default="v1.0.0", alias="SERVER_VERSION")
    tool_name: str = "CodingChallengesSolutionFinder"
    tool_description: str = (
        "Search the Coding Challenges Shared Solutions GitHub repo for shared "
        "solutions to a specific Coding Challenge"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )


class ObservabilitySettings(BaseSettings):
    """Logging configuration.

    - log_level: console verbosity (LOG_LEVEL, default INFO)
    - log_dir: directory for the session log file; empty string disables it
    - log_result_max_length: truncation length for logged tool results
    """

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Optional[str] = Field(default="logs", alias="LOG_DIR")
    log_result_max_length: int = Field(default=500, ge=100, le=5000, alias="LOG_RESULT_MAX_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class Settings(BaseSettings):
    """Root application settings loaded from .env file.

    - fetcher: remote source and timeouts (FetcherSettings)
    - server: tool registration metadata (ServerSettings)
    - observability: logging (ObservabilitySettings)

    Use get_settings() to obtain a cached singleton instance.
    """

    environment: str = Field(default="dev", alias="APP_ENV")
    fetcher: FetcherSettings = Field(default_factory=FetcherSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    return Settings()


__all__ = [
    "SHARED_SOLUTIONS_README",
    "FetcherSettings",
    "ServerSettings",
    "ObservabilitySettings",
    "Settings",
    "get_settings",
]
