"""Query building, normalization and search orchestration."""

from .query_builder import QUALITY_FILTERS, build_news_query, build_post_query
from .normalizer import engagement_score, normalize_post, normalize_story, rank_posts
from .orchestrator import NewsSearcher, search_news

__all__ = [
    "QUALITY_FILTERS",
    "build_news_query",
    "build_post_query",
    "engagement_score",
    "normalize_post",
    "normalize_story",
    "rank_posts",
    "NewsSearcher",
    "search_news",
]
