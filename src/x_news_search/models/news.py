"""News story result model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NewsResult(BaseModel):
    """A curated news story, normalized from the news search endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    headline: str = ""
    summary: str = ""
    hook: str = ""
    category: str = ""
    keywords: list[str] = []
    updated_at: str = ""
