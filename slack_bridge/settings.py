from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # Runtime
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Slack Web API transport. No tokens here: every call carries its own
    # tenant credentials.
    slack_api_base_url: str = Field(
        default="https://slack.com/api", validation_alias="SLACK_API_BASE_URL"
    )
    slack_http_timeout_seconds: float = Field(
        default=20.0, gt=0, validation_alias="SLACK_HTTP_TIMEOUT_SECONDS"
    )

    # List operations exposed to tool callers.
    slack_default_page_size: int = Field(
        default=20, ge=1, validation_alias="SLACK_DEFAULT_PAGE_SIZE"
    )
    slack_max_page_size: int = Field(
        default=100, ge=1, validation_alias="SLACK_MAX_PAGE_SIZE"
    )

    # Max characters of serialized tool output.
    slack_character_limit: int = Field(
        default=50000, ge=1000, validation_alias="SLACK_CHARACTER_LIMIT"
    )


settings = Settings()
