"""
Hacker Stories - client-side list state for Hacker News search results.

This package fetches stories from the Hacker News search API, tracks the
fetch lifecycle through a reducer-driven store, filters stories by title
and remembers the last search term between sessions.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
