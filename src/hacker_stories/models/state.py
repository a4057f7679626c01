"""Fetch lifecycle state for the stories list."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .story import Story


class FetchStatus(str, Enum):
    """Lifecycle states derived from the ``StoriesState`` flags.

      IDLE    -> nothing fetched yet (or the last result was empty)
      LOADING -> a fetch is in flight
      LOADED  -> stories are available
      ERRORED -> the last fetch failed; previous stories are kept
    """

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass(frozen=True)
class StoriesState:
    """Immutable snapshot of the stories collection and its fetch flags."""

    items: Tuple[Story, ...] = ()
    is_loading: bool = False
    is_error: bool = False

    @classmethod
    def initial(cls) -> "StoriesState":
        return cls()

    @property
    def status(self) -> FetchStatus:
        if self.is_loading:
            return FetchStatus.LOADING
        if self.is_error:
            return FetchStatus.ERRORED
        if self.items:
            return FetchStatus.LOADED
        return FetchStatus.IDLE
