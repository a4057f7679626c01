"""State machine and derived views for the stories list."""

from .filters import search_stories
from .reducer import stories_reducer
from .store import StoriesStore

__all__ = ["search_stories", "stories_reducer", "StoriesStore"]
