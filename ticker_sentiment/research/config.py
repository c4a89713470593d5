"""Configuration models for research module."""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from ticker_sentiment.data_pipeline.config import NewsAPIConfig


class SentimentConfig(BaseModel):
    """Sentiment scoring and aggregation configuration.

    The thresholds and weights encode the signal policy and are kept at
    their established values unless a caller overrides them explicitly.
    """

    positive_threshold: float = 0.05
    negative_threshold: float = -0.05
    magnitude_weight: float = 0.7
    skew_weight: float = 0.3
    max_workers: Optional[int] = None  # None or 1 = score sequentially


class ServerConfig(BaseModel):
    """HTTP API configuration."""

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json_format: bool = False
    log_use_rich: bool = True
    log_memory: bool = False  # psutil RSS in PERFORMANCE events


class ResearchConfig(BaseModel):
    """Overall research module configuration."""

    news: NewsAPIConfig = NewsAPIConfig()
    sentiment: SentimentConfig = SentimentConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()

    @property
    def newsapi_key(self) -> Optional[str]:
        return self.news.api_key

    @classmethod
    def from_yaml(cls, path: str) -> "ResearchConfig":
        """Load research configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ResearchConfig instance
        """
        path_obj = Path(path)
        if not path_obj.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def to_yaml(self, path: str) -> None:
        """Save configuration to YAML file, leaving out the API key."""
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(exclude={"news": {"api_key"}}),
                f,
                default_flow_style=False,
                sort_keys=False,
            )


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


def load_research_config(path: Optional[str] = None) -> ResearchConfig:
    """Load research config from a YAML file or the environment.

    A YAML file replaces the environment settings, except that NEWSAPI_KEY
    still fills in the API key when the file has none.
    """
    if path:
        config = ResearchConfig.from_yaml(path)
        if not config.news.api_key:
            config.news.api_key = os.getenv("NEWSAPI_KEY") or None
        return config

    origins = os.getenv("CORS_ORIGINS", "*")
    return ResearchConfig(
        news=NewsAPIConfig(
            api_key=os.getenv("NEWSAPI_KEY") or None,
            page_size=int(os.getenv("NEWS_PAGE_SIZE", "30")),
            language=os.getenv("NEWS_LANGUAGE", "en"),
            timeout_seconds=float(os.getenv("NEWS_TIMEOUT_SECONDS", "15")),
            rate_limit_per_minute=_optional_int(os.getenv("NEWS_RATE_LIMIT_PER_MINUTE")),
        ),
        sentiment=SentimentConfig(
            max_workers=_optional_int(os.getenv("SENTIMENT_MAX_WORKERS")),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        ),
        logging=LoggingConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            log_json_format=os.getenv("LOG_JSON", "false").lower() == "true",
            log_use_rich=os.getenv("LOG_RICH", "true").lower() == "true",
            log_memory=os.getenv("LOG_MEMORY", "false").lower() == "true",
        ),
    )
