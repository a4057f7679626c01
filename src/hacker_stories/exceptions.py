"""Exception hierarchy for the hacker stories service."""

from typing import Optional


class StoriesError(Exception):
    """Base class for all hacker stories errors."""


class UnknownActionError(StoriesError):
    """Raised when the reducer receives an action it does not handle.

    This is a wiring bug in the caller and is never recovered from.
    """

    def __init__(self, action: object):
        self.action = action
        super().__init__(f"Unhandled action: {action!r}")


class APIError(StoriesError):
    """Custom exception for API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class MalformedResponseError(APIError):
    """The API answered, but the body could not be parsed into stories."""
