"""
Application configuration using Pydantic settings.

Usage:
    from leaderboard.config import get_settings
    settings = get_settings()

For constants, import from leaderboard.constants:
    from leaderboard.constants import GITHUB_API_BASE, THUMBS_UP
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_PER_PAGE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    GITHUB_API_BASE,
    THUMBS_UP,
)
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Required:
        - GITHUB_PAT (personal access token for the GitHub API)
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # GitHub
    github_pat: Optional[str] = Field(default=None, validation_alias="GITHUB_PAT")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="GITHUB_USER_AGENT")
    api_base: str = Field(default=GITHUB_API_BASE, validation_alias="GITHUB_API_BASE")
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=100, validation_alias="GITHUB_PER_PAGE")

    # Aggregation
    max_concurrency: int = Field(
        default=DEFAULT_MAX_CONCURRENCY, ge=1, validation_alias="LEADERBOARD_CONCURRENCY"
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT, gt=0, validation_alias="LEADERBOARD_TIMEOUT"
    )
    reaction_labels: str = Field(default=THUMBS_UP, validation_alias="LEADERBOARD_REACTIONS")

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API base so paths can be appended with '/'."""
        return v.rstrip("/")

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """GitHub rejects requests without a User-Agent."""
        v = v.strip()
        if not v:
            return DEFAULT_USER_AGENT
        return v

    @property
    def reaction_labels_list(self) -> List[str]:
        """Parse counted reaction labels from comma-separated string."""
        return [label.strip() for label in self.reaction_labels.split(",") if label.strip()]

    def require_token(self) -> str:
        """
        Return the GitHub token or fail before any network activity.

        Raises:
            ConfigurationError: if GITHUB_PAT is not set
        """
        if not self.github_pat or not self.github_pat.strip():
            raise ConfigurationError(["GITHUB_PAT must be set to query the GitHub API"])
        return self.github_pat.strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
