"""
HTTP client for the Hacker News search API.

This module provides an async client for the Algolia-backed ``/search``
endpoint, mapping transport failures, bad status codes and unparsable
bodies onto ``APIError``.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import httpx
from loguru import logger
from pydantic import ValidationError

from ..config import get_settings
from ..exceptions import APIError, MalformedResponseError
from ..models import SearchResponse, Story


class HackerNewsAPIClient:
    """
    Async HTTP client for the Hacker News search API.

    Requests are issued once; retrying is left to the caller.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        hits_per_page: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the search API
            timeout: Request timeout in seconds
            hits_per_page: Page size sent with every search
            http_client: Pre-built httpx client; closed by its owner, not here
        """
        settings = get_settings()
        self.base_url = base_url or settings.hn_api_base_url
        self.timeout = timeout or settings.hn_api_timeout
        self.hits_per_page = hits_per_page or settings.hits_per_page

        # Ensure base URL ends with /
        if not self.base_url.endswith('/'):
            self.base_url += '/'

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

        logger.info(f"Initialized HackerNewsAPIClient with base_url: {self.base_url}")

    async def __aenter__(self) -> "HackerNewsAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            params: Query parameters

        Returns:
            httpx.Response: HTTP response

        Raises:
            APIError: If the request fails or returns a non-200 status
        """
        url = urljoin(self.base_url, endpoint)
        logger.debug(f"Making {method} request to {url} params={params}")

        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                timeout=self.timeout
            )
        except httpx.HTTPError as e:
            raise APIError(f"Request failed: {str(e)}") from e

        if response.status_code != 200:
            raise APIError(f"HTTP {response.status_code}: {response.text}", response.status_code)

        logger.debug(f"Request successful: {method} {url}")
        return response

    async def search_page(self, query: str, page: int = 0) -> SearchResponse:
        """
        Retrieve one page of search results.

        Args:
            query: Free-text search query
            page: Zero-based result page

        Returns:
            SearchResponse: Parsed response envelope

        Raises:
            APIError: If the request fails
            MalformedResponseError: If the body is not a valid search response
        """
        params: Dict[str, Any] = {"query": query, "tags": "story"}
        if page:
            params["page"] = page
        if self.hits_per_page:
            params["hitsPerPage"] = self.hits_per_page

        response = await self._make_request("GET", "search", params=params)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Search response is not JSON: {str(e)}", response.status_code) from e

        # Comment hits carry a null title; they are not stories
        if isinstance(data, dict) and isinstance(data.get("hits"), list):
            hits = data["hits"]
            titled = [hit for hit in hits if not isinstance(hit, dict) or hit.get("title")]
            if len(titled) != len(hits):
                logger.debug(f"Skipping {len(hits) - len(titled)} untitled hits for '{query}'")
                data = {**data, "hits": titled}

        try:
            return SearchResponse.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Failed to parse search response: {str(e)}", response.status_code) from e

    async def search(self, query: str) -> List[Story]:
        """
        Search stories matching ``query``.

        Args:
            query: Free-text search query

        Returns:
            List[Story]: Hits of the first result page

        Raises:
            APIError: If the request fails or the response is malformed
        """
        result = await self.search_page(query)
        logger.info(f"Search '{query}' returned {len(result.hits)} of {result.nb_hits} hits")
        return result.hits
