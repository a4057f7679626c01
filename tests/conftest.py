"""Shared fixtures for the hacker stories test-suite."""

from typing import Dict, List, Optional

import pytest

from hacker_stories.config import Settings
from hacker_stories.models import Story


def make_story(id, title: str, **kwargs) -> Story:
    """Build a story with sensible defaults for the fields a test ignores."""
    data = {
        "objectID": str(id),
        "title": title,
        "url": f"https://example.com/{id}",
        "author": "jordan",
        "num_comments": 3,
        "points": 5,
    }
    data.update(kwargs)
    return Story.model_validate(data)


class FakeSource:
    """Story source answering from a query -> stories mapping."""

    def __init__(self, results: Optional[Dict[str, List[Story]]] = None, error: Optional[Exception] = None):
        self.results = results or {}
        self.error = error
        self.queries: List[str] = []

    async def search(self, query: str) -> List[Story]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.results.get(query, [])


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        preferences_path=str(tmp_path / "preferences.json"),
    )


@pytest.fixture
def react_stories() -> List[Story]:
    return [make_story(0, "React"), make_story(1, "Redux")]
