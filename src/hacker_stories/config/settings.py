"""
Configuration settings for the hacker stories service.

This module handles environment variable loading and configuration management
using Pydantic for validation and type safety.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Hacker stories configuration settings.

    All settings can be overridden via environment variables.
    """

    # Search API Configuration
    hn_api_base_url: str = Field(
        default="https://hn.algolia.com/api/v1/",
        description="Base URL for the Hacker News search API"
    )
    hn_api_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for API requests"
    )
    hits_per_page: Optional[int] = Field(
        default=None,
        ge=1,
        description="Page size requested from the search API (API default if unset)"
    )

    # Search Preferences
    default_search_term: str = Field(
        default="React",
        description="Search term used when no preference has been stored"
    )
    search_preference_key: str = Field(
        default="search",
        description="Key under which the last search term is persisted"
    )
    preferences_path: str = Field(
        default=".hacker_stories/preferences.json",
        description="File backing the persistent preference store"
    )
    search_debounce_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Quiet period before an edited search is committed (0 = explicit commit only)"
    )

    # Dashboard Configuration
    page_title: str = Field(
        default="My Hacker Stories",
        description="Title shown at the top of the page"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="text",
        description="Logging format (json or text)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()
