"""Client contract consumed by the search orchestrator."""

from typing import Any, Protocol


class SearchClient(Protocol):
    """The two X API operations the search needs.

    Both return the decoded JSON body: ``data`` holds the records and
    ``errors`` any endpoint-reported problems. Post search responses also
    carry ``includes.users`` for the ``author_id`` expansion.
    """

    async def search_news(
        self,
        query: str,
        *,
        max_results: int,
        max_age_hours: int,
    ) -> dict[str, Any]: ...

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
    ) -> dict[str, Any]: ...
