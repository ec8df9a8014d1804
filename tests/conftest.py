"""Pytest fixtures for X News Search tests."""

import pytest
from structlog.testing import capture_logs


class FakeClient:
    """In-memory stand-in for the X API client."""

    def __init__(
        self,
        news_response=None,
        posts_response=None,
        news_error: Exception | None = None,
        posts_error: Exception | None = None,
    ):
        self.news_response = news_response if news_response is not None else {"data": []}
        self.posts_response = posts_response if posts_response is not None else {"data": []}
        self.news_error = news_error
        self.posts_error = posts_error
        self.news_calls: list[dict] = []
        self.post_calls: list[dict] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def search_news(self, query, *, max_results, max_age_hours):
        self.news_calls.append(
            {"query": query, "max_results": max_results, "max_age_hours": max_age_hours}
        )
        if self.news_error:
            raise self.news_error
        return self.news_response

    async def search_recent_posts(self, query, **options):
        self.post_calls.append({"query": query, **options})
        if self.posts_error:
            raise self.posts_error
        return self.posts_response


@pytest.fixture(autouse=True)
def captured_logs():
    """Keep structlog output out of test stdout."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def sample_story():
    """A fully populated news story record."""
    return {
        "rest_id": "1874000000000000001",
        "name": "Gold hits record high",
        "summary": "Gold prices climbed above $2,700 an ounce as investors sought safety.",
        "hook": "Bullion rally extends for a third week",
        "category": "Markets",
        "keywords": ["gold", "commodities"],
        "last_updated_at_ms": 1735725600000,
    }


@pytest.fixture
def sample_posts_response():
    """A recent search response with three posts and two expanded users."""
    return {
        "data": [
            {
                "id": "101",
                "text": "Silver is moving https://example.com/silver",
                "author_id": "u1",
                "created_at": "2025-01-01T09:00:00.000Z",
                "public_metrics": {"like_count": 10, "retweet_count": 0, "reply_count": 0},
            },
            {
                "id": "102",
                "text": "Gold update https://example.com/gold",
                "author_id": "u2",
                "created_at": "2025-01-01T08:00:00.000Z",
                "public_metrics": {"like_count": 0, "retweet_count": 5, "reply_count": 0},
            },
            {
                "id": "103",
                "text": "Commodities thread https://example.com/thread",
                "author_id": "u1",
                "created_at": "2025-01-01T07:00:00.000Z",
                "public_metrics": {"like_count": 1, "retweet_count": 1, "reply_count": 100},
            },
        ],
        "includes": {
            "users": [
                {"id": "u1", "name": "Market Watch", "username": "marketwatch", "verified": True},
                {"id": "u2", "name": "Metals Desk", "username": "metalsdesk"},
            ]
        },
    }


@pytest.fixture
def fake_client_factory():
    """Build FakeClient instances."""
    return FakeClient
