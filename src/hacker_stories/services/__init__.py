"""
Services module for the hacker stories service.

This module provides preference persistence, story fetching and the
stories service that ties them to the store.
"""

from .preferences import InMemoryStore, JsonFileStore, KeyValueStore, SemiPersistentValue
from .stories_service import StoriesService, StoriesView
from .story_fetcher import StoryFetcher, StorySource

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "SemiPersistentValue",
    "StoriesService",
    "StoriesView",
    "StoryFetcher",
    "StorySource",
]
