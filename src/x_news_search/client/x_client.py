"""HTTP client for the X API v2 search endpoints."""

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


class XApiError(Exception):
    """Raised when an X API request cannot be completed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class XClient:
    """Authenticated async client for news and recent post search."""

    DEFAULT_BASE_URL = "https://api.x.com/2"
    NEWS_SEARCH_PATH = "/news/search"
    RECENT_SEARCH_PATH = "/tweets/search/recent"

    def __init__(
        self,
        bearer_token: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            bearer_token: X API bearer token
            base_url: API root, defaults to the public v2 endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used in tests)
        """
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._bearer_token = bearer_token
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def start(self) -> httpx.AsyncClient:
        """Open the underlying HTTP connection pool."""
        if self._http is not None:
            return self._http

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self._bearer_token}",
                "Accept": "application/json",
            },
            timeout=self.timeout,
            transport=self._transport,
        )
        return self._http

    async def stop(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "XClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def search_news(
        self,
        query: str,
        *,
        max_results: int,
        max_age_hours: int,
    ) -> dict[str, Any]:
        """Search curated news stories.

        Args:
            query: OR-combined search terms
            max_results: Maximum stories to return
            max_age_hours: Only include stories updated within this window

        Returns:
            Decoded response body
        """
        params = {
            "query": query,
            "max_results": max_results,
            "max_age_hours": max_age_hours,
        }
        return await self._get(self.NEWS_SEARCH_PATH, params)

    async def search_recent_posts(
        self,
        query: str,
        *,
        start_time: str,
        max_results: int,
        sort_order: str,
        tweet_fields: list[str],
        user_fields: list[str],
        expansions: list[str],
    ) -> dict[str, Any]:
        """Search posts from the last seven days.

        Args:
            query: Post search query, including any operators
            start_time: ISO-8601 lower bound for post creation time
            max_results: Maximum posts to return
            sort_order: ``relevancy`` or ``recency``
            tweet_fields: Post fields to include
            user_fields: Expanded user fields to include
            expansions: Related objects to expand

        Returns:
            Decoded response body
        """
        params = {
            "query": query,
            "start_time": start_time,
            "max_results": max_results,
            "sort_order": sort_order,
            "tweet.fields": ",".join(tweet_fields),
            "user.fields": ",".join(user_fields),
            "expansions": ",".join(expansions),
        }
        return await self._get(self.RECENT_SEARCH_PATH, params)

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        http = await self.start()

        logger.debug("x_api_request", path=path, query=params.get("query"))

        try:
            response = await http.get(path, params=params)
        except httpx.HTTPError as e:
            raise XApiError(f"request to {path} failed: {e}") from e

        if response.is_error:
            raise XApiError(
                f"{path} returned HTTP {response.status_code}: {self._error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise XApiError(f"{path} returned invalid JSON") from e

        if not isinstance(body, dict):
            raise XApiError(f"{path} returned unexpected payload")

        logger.debug(
            "x_api_response",
            path=path,
            status=response.status_code,
            results=len(body.get("data") or []),
        )
        return body

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract a readable message from an API error response."""
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or response.reason_phrase

        if isinstance(body, dict):
            for key in ("detail", "title", "error"):
                if body.get(key):
                    return str(body[key])
        return response.reason_phrase
