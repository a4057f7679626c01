"""Unit tests for the rendering helpers."""

from conftest import make_story
from hacker_stories.models import FetchStatus
from hacker_stories.services import StoriesView
from hacker_stories.ui import status_message, story_byline


def build_view(**overrides) -> StoriesView:
    data = {
        "visible_items": [make_story(0, "React")],
        "is_loading": False,
        "is_error": False,
        "search_term": "React",
        "status": FetchStatus.LOADED,
    }
    data.update(overrides)
    return StoriesView(**data)


class TestStoryByline:
    """Test cases for story_byline."""

    def test_plural(self):
        story = make_story(0, "React", author="dan", num_comments=12, points=300)

        assert story_byline(story) == "dan, 12 comments, 300 points"

    def test_singular_and_missing_author(self):
        story = make_story(0, "React", author=None, num_comments=1, points=1)

        assert story_byline(story) == "unknown, 1 comment, 1 point"


class TestStatusMessage:
    """Test cases for status_message."""

    def test_loading(self):
        assert status_message(build_view(is_loading=True)) == "Loading ..."

    def test_error(self):
        assert status_message(build_view(is_error=True)) == "Something went wrong ..."

    def test_no_matches(self):
        view = build_view(visible_items=[], search_term="Elm")

        assert status_message(view) == "No stories match 'Elm'."

    def test_nothing_to_say(self):
        assert status_message(build_view()) is None
