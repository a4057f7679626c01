"""Pure rendering helpers for the stories page."""

from typing import Optional

from .models import Story
from .services import StoriesView


def story_byline(story: Story) -> str:
    """Format the author and engagement line shown under a story title."""
    comments = "comment" if story.comment_count == 1 else "comments"
    points = "point" if story.points == 1 else "points"
    author = story.author or "unknown"
    return f"{author}, {story.comment_count} {comments}, {story.points} {points}"


def status_message(view: StoriesView) -> Optional[str]:
    """
    Pick the status line for the current view.

    Returns:
        The message to show, or None when the list speaks for itself
    """
    if view.is_loading:
        return "Loading ..."
    if view.is_error:
        return "Something went wrong ..."
    if not view.visible_items and view.search_term:
        return f"No stories match '{view.search_term}'."
    return None
