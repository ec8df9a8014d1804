"""Aggregated search output model."""

from pydantic import BaseModel

from .news import NewsResult
from .post import PostResult


class SearchOutput(BaseModel):
    """Combined result of one search run.

    Always produced, even on failure: sub-search problems are reported in
    ``errors`` alongside whatever results were obtained.
    """

    query: str
    news: list[NewsResult] = []
    posts: list[PostResult] = []
    errors: list[str] = []

    @property
    def has_results(self) -> bool:
        return bool(self.news or self.posts)
