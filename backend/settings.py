"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() wherever a Settings instance is needed.

Usage:
    from backend.settings import get_settings, Settings

    # Direct access (module-level)
    settings = get_settings()
    print(settings.program_api_url)

    # Explicit settings for tests
    settings = Settings(environment="test", _env_file=None)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.converters import DayNumbering
from domain.mutations import SupersetAdjacency


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # External Services
    # -------------------------------------------------------------------------
    program_api_url: str = Field(
        default="http://program-api:8005",
        description="URL for the program API (programs, categories, routines)",
    )
    video_library_url: str = Field(
        default="http://video-library-api:8006",
        description="URL for the video library service",
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token sent to the program API and video library",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to every collaborator request",
    )

    # -------------------------------------------------------------------------
    # Editor Behaviour
    # -------------------------------------------------------------------------
    day_numbering: DayNumbering = Field(
        default=DayNumbering.MONDAY_FIRST,
        description="Day-number convention of the program store",
    )
    superset_adjacency: SupersetAdjacency = Field(
        default=SupersetAdjacency.NONE,
        description="Whether superset members are re-clustered after a reorder",
    )
    id_strategy: str = Field(
        default="uuid",
        description="Identifier generation: uuid or sequential",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("id_strategy")
    @classmethod
    def validate_id_strategy(cls, v: str) -> str:
        valid_strategies = {"uuid", "sequential"}
        if v.lower() not in valid_strategies:
            raise ValueError(
                f"Invalid id_strategy '{v}'. Must be one of: {valid_strategies}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
