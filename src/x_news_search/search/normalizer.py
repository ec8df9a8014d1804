"""Map X API response records onto result models.

Every field has a fallback, so partially populated records (deleted
authors, missing metrics) still normalize.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from ..models.news import NewsResult
from ..models.post import PostResult

POST_URL_TEMPLATE = "https://x.com/{username}/status/{post_id}"
POST_URL_FALLBACK_TEMPLATE = "https://x.com/i/status/{post_id}"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _count(value: Any) -> int:
    try:
        return max(0, int(value or 0))
    except (TypeError, ValueError):
        return 0


def _keywords(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(k) for k in value]


def millis_to_iso(value: Any) -> str:
    """Convert epoch milliseconds to ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Returns an empty string for missing or unparseable values.
    """
    if not value:
        return ""
    try:
        dt = EPOCH + timedelta(milliseconds=int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return ""
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_story(story: dict[str, Any]) -> NewsResult:
    """Normalize one news story record."""
    return NewsResult(
        id=_str(story.get("rest_id")),
        headline=_str(story.get("name")),
        summary=_str(story.get("summary")),
        hook=_str(story.get("hook")),
        category=_str(story.get("category")),
        keywords=_keywords(story.get("keywords")),
        updated_at=millis_to_iso(story.get("last_updated_at_ms")),
    )


def build_author_lookup(users: list[dict[str, Any]] | None) -> dict[str, dict[str, Any]]:
    """Index expanded user records by id."""
    lookup: dict[str, dict[str, Any]] = {}
    for user in users or []:
        user_id = user.get("id")
        if not user_id:
            continue
        lookup[str(user_id)] = {
            "name": _str(user.get("name")),
            "username": _str(user.get("username")),
            "verified": bool(user.get("verified", False)),
        }
    return lookup


def post_url(post_id: str, username: str) -> str:
    """Build a post permalink, falling back to the id-only form."""
    if username:
        return POST_URL_TEMPLATE.format(username=username, post_id=post_id)
    return POST_URL_FALLBACK_TEMPLATE.format(post_id=post_id)


def normalize_post(
    post: dict[str, Any],
    authors: dict[str, dict[str, Any]],
) -> PostResult:
    """Normalize one post record, resolving its author from ``authors``.

    Authors missing from the lookup (deleted or suspended accounts) leave
    name and handle empty.
    """
    post_id = _str(post.get("id"))
    author_id = _str(post.get("author_id"))
    author = authors.get(author_id, {})
    metrics = post.get("public_metrics") or {}
    username = author.get("username", "")

    return PostResult(
        id=post_id,
        text=_str(post.get("text")),
        author_id=author_id,
        author_name=author.get("name", ""),
        author_username=username,
        verified=author.get("verified", False),
        created_at=_str(post.get("created_at")),
        likes=_count(metrics.get("like_count")),
        reposts=_count(metrics.get("retweet_count")),
        replies=_count(metrics.get("reply_count")),
        url=post_url(post_id, username),
    )


def engagement_score(post: PostResult) -> int:
    """Weighted engagement: reposts count most, replies least."""
    return post.likes * 2 + post.reposts * 3 + post.replies


def rank_posts(posts: list[PostResult]) -> list[PostResult]:
    """Sort posts by engagement, highest first.

    The sort is stable, so equal scores keep the server's relevance order.
    """
    return sorted(posts, key=engagement_score, reverse=True)
