"""Derived view over the stories collection."""

from typing import Iterable, List

from ..models import Story


def search_stories(stories: Iterable[Story], query: str) -> List[Story]:
    """
    Return the stories whose title contains ``query``, ignoring case.

    The input is left untouched and matches keep their original order. An
    empty query matches every story.

    Args:
        stories: Canonical stories collection
        query: Live search term

    Returns:
        List[Story]: Matching stories
    """
    needle = query.lower()
    return [story for story in stories if needle in story.title.lower()]
