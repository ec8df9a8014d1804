"""Input parameters for a single search invocation."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

MIN_DAYS = 1
MAX_DAYS = 7
MIN_RESULTS = 1
MAX_RESULTS = 100


class SearchParams(BaseModel):
    """Search terms and options, fixed for one run."""

    model_config = ConfigDict(frozen=True)

    queries: list[Annotated[str, Field(min_length=1)]] = Field(
        ..., min_length=1, description="Search terms, combined with OR"
    )
    days: int = Field(default=1, ge=MIN_DAYS, le=MAX_DAYS, description="Lookback window in days")
    max: int = Field(default=10, ge=MIN_RESULTS, le=MAX_RESULTS, description="Maximum results")
    lang: str = Field(default="en", description="BCP-47 language code for post search")
    raw: bool = Field(default=False, description="Disable quality filters on post search")
    posts: bool = Field(default=False, description="Search posts even when news is found")
