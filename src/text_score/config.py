"""Configuration settings for text-score."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_score.models import Aggregation


class Settings(BaseSettings):
    """Settings loaded from TEXT_SCORE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEXT_SCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scoring defaults
    default_n: int = Field(default=1, ge=1, description="Default n-gram size")
    default_aggregation: Aggregation = Field(
        default=Aggregation.MAX,
        description="Default multi-reference aggregation (max or average)",
    )
    batch_workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads for batch scoring (1 scores sequentially)",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format (json or console)")
