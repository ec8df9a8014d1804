"""Query strings for the news and post search endpoints.

All terms go into one request: the API bills per returned result, so a
single OR-combined query is cheaper than one call per term.
"""

# Server-side operators appended to post search unless raw mode is on.
# Order is fixed so generated queries are reproducible.
QUALITY_FILTERS = (
    "-is:retweet",
    "-is:reply",
    "has:links",
    "-is:nullcast",
)


def build_post_query(queries: list[str], lang: str, raw: bool) -> str:
    """Combine search terms into a recent post search query.

    Args:
        queries: Search terms
        lang: Language code for the ``lang:`` operator
        raw: Skip the quality filters

    Returns:
        Query string
    """
    if len(queries) == 1:
        combined = queries[0]
    else:
        combined = " OR ".join(f"({q})" for q in queries)

    if raw:
        return combined

    filters = [*QUALITY_FILTERS, f"lang:{lang}"]
    return f"{combined} {' '.join(filters)}"


def build_news_query(queries: list[str]) -> str:
    """Combine search terms for the news endpoint, which takes no operators."""
    return " OR ".join(queries)
