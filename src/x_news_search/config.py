"""Configuration settings for X News Search."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Credentials
    api_key: str = Field(
        default="",
        validation_alias="X_API_KEY",
        description="Bearer token for the X API",
    )

    # API settings
    api_base_url: str = Field(default="https://api.x.com/2", description="X API base URL")
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_json: bool = Field(default=False, description="Render log lines as JSON")

    model_config = {
        "env_prefix": "X_NEWS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }
