"""
Reducer for the stories fetch lifecycle.

``stories_reducer`` is a pure function: it never mutates its inputs and
returns either a new ``StoriesState`` or, for a no-op removal, the state it
was given.
"""

from dataclasses import replace

from ..exceptions import UnknownActionError
from ..models import (
    FetchFailure,
    FetchInit,
    FetchSuccess,
    RemoveStory,
    StoriesState,
)


def stories_reducer(state: StoriesState, action) -> StoriesState:
    """
    Compute the next state for ``action``.

    Args:
        state: Current state
        action: One of the actions from ``hacker_stories.models.actions``

    Returns:
        StoriesState: The next state

    Raises:
        UnknownActionError: If ``action`` is not a known stories action
    """
    if isinstance(action, FetchInit):
        return replace(state, is_loading=True, is_error=False)

    if isinstance(action, FetchSuccess):
        return replace(state, items=action.payload, is_loading=False, is_error=False)

    if isinstance(action, FetchFailure):
        return replace(state, is_loading=False, is_error=True)

    if isinstance(action, RemoveStory):
        target_id = action.story.id
        if not any(story.id == target_id for story in state.items):
            return state
        return replace(
            state,
            items=tuple(story for story in state.items if story.id != target_id),
        )

    raise UnknownActionError(action)
