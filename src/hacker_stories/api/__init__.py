"""Search API integration for the hacker stories service."""

from .client import HackerNewsAPIClient

__all__ = ["HackerNewsAPIClient"]
