"""
Data source adapter driving the stories store.

``StoryFetcher`` turns one committed search query into the action sequence
``FetchInit`` followed by exactly one of ``FetchSuccess`` or
``FetchFailure``. Results of a fetch that has been superseded by a newer one
are dropped.
"""

from typing import Callable, Protocol, Sequence

from loguru import logger

from ..exceptions import APIError
from ..models import FetchFailure, FetchInit, FetchSuccess, Story


class StorySource(Protocol):
    """Anything that can search stories asynchronously."""

    async def search(self, query: str) -> Sequence[Story]:
        ...


class StoryFetcher:
    """
    Fetch stories from a ``StorySource`` and report the outcome as actions.

    Every fetch takes a request token. Only the fetch holding the latest
    token may dispatch its outcome.
    """

    def __init__(self, source: StorySource, dispatch: Callable):
        """
        Initialize the fetcher.

        Args:
            source: Story source, usually a ``HackerNewsAPIClient``
            dispatch: Callable applying an action to the stories store
        """
        self.source = source
        self.dispatch = dispatch
        self._token = 0

    @property
    def token(self) -> int:
        return self._token

    def invalidate(self) -> None:
        """Discard the result of any fetch currently in flight."""
        self._token += 1

    def is_current(self, token: int) -> bool:
        return token == self._token

    async def fetch_stories(self, query: str) -> bool:
        """
        Fetch stories for ``query``.

        ``FetchInit`` is dispatched before the request is awaited. An empty
        query is ignored.

        Args:
            query: Committed search query

        Returns:
            bool: False if the query was empty and nothing happened
        """
        if not query:
            logger.debug("Skipping fetch for empty query")
            return False

        self._token += 1
        token = self._token
        self.dispatch(FetchInit())
        logger.info(f"Fetching stories for '{query}' (request {token})")

        try:
            stories = await self.source.search(query)
        except APIError as e:
            self._settle(token, query, FetchFailure(error=e.message))
        except Exception as e:
            logger.exception(f"Unexpected error fetching stories for '{query}'")
            self._settle(token, query, FetchFailure(error=str(e)))
        else:
            self._settle(token, query, FetchSuccess(payload=tuple(stories)))
        return True

    def _settle(self, token: int, query: str, action) -> None:
        if not self.is_current(token):
            logger.info(f"Discarding stale result for '{query}' (request {token}, current {self._token})")
            return

        if isinstance(action, FetchFailure):
            logger.error(f"Error fetching stories for '{query}': {action.error}")
        else:
            logger.info(f"Fetched {len(action.payload)} stories for '{query}'")
        self.dispatch(action)
