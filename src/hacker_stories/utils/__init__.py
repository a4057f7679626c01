"""Utility helpers for the hacker stories service."""

from .logging import setup_logging

__all__ = ["setup_logging"]
