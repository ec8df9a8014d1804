"""Pydantic models for search parameters and results."""

from .params import SearchParams
from .news import NewsResult
from .post import PostResult
from .search_output import SearchOutput

__all__ = [
    "SearchParams",
    "NewsResult",
    "PostResult",
    "SearchOutput",
]
