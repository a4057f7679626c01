"""
Actions understood by the stories reducer.

Each action is a small immutable value tagged with an ``ActionType``. The
set is closed: the reducer raises on anything not defined here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence, Union

from .story import Story


class ActionType(str, Enum):
    """Tags for the stories actions."""

    STORIES_FETCH_INIT = "STORIES_FETCH_INIT"
    STORIES_FETCH_SUCCESS = "STORIES_FETCH_SUCCESS"
    STORIES_FETCH_FAILURE = "STORIES_FETCH_FAILURE"
    REMOVE_STORY = "REMOVE_STORY"


@dataclass(frozen=True)
class FetchInit:
    """A fetch has started."""

    type: ClassVar[ActionType] = ActionType.STORIES_FETCH_INIT


@dataclass(frozen=True)
class FetchSuccess:
    """A fetch completed; ``payload`` replaces the current stories."""

    payload: Sequence[Story]
    type: ClassVar[ActionType] = ActionType.STORIES_FETCH_SUCCESS


@dataclass(frozen=True)
class FetchFailure:
    """A fetch failed; ``error`` is a human-readable reason for logging."""

    error: Optional[str] = None
    type: ClassVar[ActionType] = ActionType.STORIES_FETCH_FAILURE


@dataclass(frozen=True)
class RemoveStory:
    """Dismiss ``story`` (matched by id) from the collection."""

    story: Story
    type: ClassVar[ActionType] = ActionType.REMOVE_STORY


Action = Union[FetchInit, FetchSuccess, FetchFailure, RemoveStory]
