"""Data models for the hacker stories service."""

from .actions import (
    Action,
    ActionType,
    FetchFailure,
    FetchInit,
    FetchSuccess,
    RemoveStory,
)
from .state import FetchStatus, StoriesState
from .story import SearchResponse, Story

__all__ = [
    "Action",
    "ActionType",
    "FetchFailure",
    "FetchInit",
    "FetchSuccess",
    "RemoveStory",
    "FetchStatus",
    "StoriesState",
    "SearchResponse",
    "Story",
]
