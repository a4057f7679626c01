"""Configuration module for the hacker stories service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
