"""News search orchestrator with post search fallback."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar

import structlog

from ..client.base import SearchClient
from ..models.news import NewsResult
from ..models.params import SearchParams
from ..models.post import PostResult
from ..models.search_output import SearchOutput
from .normalizer import build_author_lookup, normalize_post, normalize_story, rank_posts
from .query_builder import build_news_query, build_post_query

logger = structlog.get_logger()

T = TypeVar("T")

POST_TWEET_FIELDS = ["created_at", "author_id", "public_metrics", "source", "entities"]
POST_USER_FIELDS = ["name", "username", "verified", "profile_image_url"]
POST_EXPANSIONS = ["author_id"]
POST_SORT_ORDER = "relevancy"


@dataclass
class Lookup(Generic[T]):
    """Outcome of one endpoint call: normalized items plus error messages."""

    items: list[T] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _describe(error: Exception) -> str:
    return str(error) or error.__class__.__name__


def _api_errors(response: dict[str, Any], label: str) -> list[str]:
    return [
        f"{label} API error: {json.dumps(err, separators=(',', ':'))}"
        for err in response.get("errors") or []
    ]


class NewsSearcher:
    """Runs the news lookup and, when needed, the post lookup.

    News stories are preferred. Post search runs when the news lookup
    yields nothing or when explicitly requested. Each endpoint is called
    at most once; failures are reported in the output, never raised.
    """

    def __init__(self, client: SearchClient):
        """Initialize searcher.

        Args:
            client: API client implementing both search operations
        """
        self.client = client

    async def search(self, params: SearchParams) -> SearchOutput:
        """Search news, falling back to posts.

        Args:
            params: Search terms and options

        Returns:
            SearchOutput with results and any collected errors
        """
        logger.info("starting_search", queries=params.queries, days=params.days, max=params.max)

        news = await self._lookup_news(params)
        errors = list(news.errors)

        posts: Lookup[PostResult] = Lookup()
        if params.posts or not news.items:
            posts = await self._lookup_posts(params)
            errors.extend(posts.errors)

        logger.info(
            "search_complete",
            news=len(news.items),
            posts=len(posts.items),
            errors=len(errors),
        )

        return SearchOutput(
            query=" + ".join(params.queries),
            news=news.items,
            posts=posts.items,
            errors=errors,
        )

    async def _lookup_news(self, params: SearchParams) -> Lookup[NewsResult]:
        result: Lookup[NewsResult] = Lookup()
        query = build_news_query(params.queries)

        try:
            response = await self.client.search_news(
                query,
                max_results=params.max,
                max_age_hours=params.days * 24,
            )
            result.errors.extend(_api_errors(response, "News"))
            result.items = [normalize_story(story) for story in response.get("data") or []]
        except Exception as e:
            logger.warning("news_search_failed", query=query, error=_describe(e))
            result.errors.append(
                f"News search failed: {_describe(e)}. Falling back to post search."
            )
            return result

        logger.info("news_search_complete", query=query, stories=len(result.items))
        return result

    async def _lookup_posts(self, params: SearchParams) -> Lookup[PostResult]:
        result: Lookup[PostResult] = Lookup()
        query = build_post_query(params.queries, params.lang, params.raw)
        start_time = datetime.now(timezone.utc) - timedelta(days=params.days)

        try:
            response = await self.client.search_recent_posts(
                query,
                start_time=start_time.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
                max_results=params.max,
                sort_order=POST_SORT_ORDER,
                tweet_fields=POST_TWEET_FIELDS,
                user_fields=POST_USER_FIELDS,
                expansions=POST_EXPANSIONS,
            )
            result.errors.extend(_api_errors(response, "Posts"))

            includes = response.get("includes") or {}
            authors = build_author_lookup(includes.get("users"))
            posts = [normalize_post(post, authors) for post in response.get("data") or []]
            result.items = rank_posts(posts)
        except Exception as e:
            logger.warning("post_search_failed", query=query, error=_describe(e))
            result.errors.append(f"Post search failed: {_describe(e)}")
            return result

        logger.info("post_search_complete", query=query, posts=len(result.items))
        return result


async def search_news(client: SearchClient, params: SearchParams) -> SearchOutput:
    """Search news and posts for ``params`` using ``client``."""
    return await NewsSearcher(client).search(params)
