"""Post result model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostResult(BaseModel):
    """A user post with resolved author and engagement metrics."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Identifiers
    id: str = ""
    text: str = ""

    # Author
    author_id: str = ""
    author_name: str = ""
    author_username: str = ""
    verified: bool = False

    created_at: str = ""

    # Engagement metrics
    likes: int = Field(default=0, ge=0)
    reposts: int = Field(default=0, ge=0)
    replies: int = Field(default=0, ge=0)

    url: str = ""
