"""
Stories service for the dashboard.

This module wires the search preference, the stories store and the story
fetcher together and exposes the view and callbacks the presentation layer
works with.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, List, Optional, Set

from loguru import logger

from ..api import HackerNewsAPIClient
from ..config import Settings, get_settings
from ..core import StoriesStore, search_stories
from ..models import FetchStatus, RemoveStory, StoriesState, Story
from .preferences import JsonFileStore, KeyValueStore, SemiPersistentValue
from .story_fetcher import StoryFetcher, StorySource


@dataclass(frozen=True)
class StoriesView:
    """Everything the presentation layer needs to render the stories page."""

    visible_items: List[Story]
    is_loading: bool
    is_error: bool
    search_term: str
    status: FetchStatus


class StoriesService:
    """
    Centralized service behind the stories page.

    Edits to the search term are persisted immediately but only fetched once
    committed, either explicitly through ``on_commit_search`` or after the
    configured debounce period.
    """

    def __init__(
        self,
        source: StorySource,
        preferences: KeyValueStore,
        settings: Optional[Settings] = None,
        store: Optional[StoriesStore] = None,
        owns_source: bool = False
    ):
        """
        Initialize the stories service.

        Args:
            source: Story source used for fetching
            preferences: Key/value store holding the search preference
            settings: Settings instance (cached settings if omitted)
            store: Stories store (a fresh one if omitted)
            owns_source: Close ``source`` on ``aclose``
        """
        self.settings = settings or get_settings()
        self.source = source
        self.store = store or StoriesStore()
        self.fetcher = StoryFetcher(source, self.store.dispatch)
        self._search_term = SemiPersistentValue(
            preferences,
            self.settings.search_preference_key,
            self.settings.default_search_term
        )
        self._owns_source = owns_source
        self._committed_query: Optional[str] = None
        self._pending_commit: Optional[asyncio.Task] = None
        self._commit_tasks: Set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StoriesService":
        """Build a service backed by the search API and a preferences file."""
        settings = settings or get_settings()
        client = HackerNewsAPIClient(
            base_url=settings.hn_api_base_url,
            timeout=settings.hn_api_timeout,
            hits_per_page=settings.hits_per_page
        )
        return cls(
            source=client,
            preferences=JsonFileStore(settings.preferences_path),
            settings=settings,
            owns_source=True
        )

    @property
    def state(self) -> StoriesState:
        return self.store.state

    @property
    def search_term(self) -> str:
        return self._search_term.value

    @property
    def committed_query(self) -> Optional[str]:
        return self._committed_query

    @property
    def view(self) -> StoriesView:
        state = self.store.state
        return StoriesView(
            visible_items=search_stories(state.items, self.search_term),
            is_loading=state.is_loading,
            is_error=state.is_error,
            search_term=self.search_term,
            status=state.status
        )

    def subscribe(self, listener: Callable[[StoriesState], None]) -> Callable[[], None]:
        return self.store.subscribe(listener)

    async def start(self) -> bool:
        """Fetch stories for the initial search term."""
        return await self.on_commit_search(force=True)

    def on_search_change(self, text: str) -> None:
        """
        Record an edit of the search input.

        Args:
            text: New search term
        """
        self._search_term.set(text)

        if self.settings.search_debounce_seconds > 0:
            self._schedule_commit()

    async def on_commit_search(self, force: bool = False) -> bool:
        """
        Fetch stories for the current search term.

        Resubmitting the last committed query only fetches again if that
        fetch failed or ``force`` is set.

        Args:
            force: Fetch even if the query is unchanged

        Returns:
            bool: True if a fetch was issued
        """
        self._cancel_pending_commit()

        query = self.search_term
        if not force and query == self._committed_query and not self.store.state.is_error:
            logger.debug(f"Query '{query}' already committed")
            return False

        self._committed_query = query
        return await self.fetcher.fetch_stories(query)

    def on_remove(self, story: Story) -> None:
        """Dismiss ``story`` from the list."""
        self.store.dispatch(RemoveStory(story))

    async def aclose(self) -> None:
        """Cancel scheduled commits and release the story source."""
        self._cancel_pending_commit()
        current = asyncio.current_task()
        tasks = [task for task in self._commit_tasks if task is not current]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        self.fetcher.invalidate()
        if self._owns_source and hasattr(self.source, "aclose"):
            await self.source.aclose()

    def _schedule_commit(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; search will be fetched on explicit commit")
            return

        self._cancel_pending_commit()
        task = loop.create_task(self._debounced_commit())
        self._commit_tasks.add(task)
        task.add_done_callback(self._commit_tasks.discard)
        task.add_done_callback(self._log_commit_error)
        self._pending_commit = task

    async def _debounced_commit(self) -> None:
        await asyncio.sleep(self.settings.search_debounce_seconds)
        # Past the quiet period; later keystrokes must not cancel the fetch
        self._pending_commit = None
        await self.on_commit_search()

    def _cancel_pending_commit(self) -> None:
        if self._pending_commit is not None and not self._pending_commit.done():
            self._pending_commit.cancel()
        self._pending_commit = None

    @staticmethod
    def _log_commit_error(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.opt(exception=error).error(f"Debounced search commit failed: {str(error)}")
