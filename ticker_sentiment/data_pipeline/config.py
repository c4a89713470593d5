"""Configuration models for the data pipeline module."""

from typing import Optional

from pydantic import BaseModel


class NewsAPIConfig(BaseModel):
    """NewsAPI.org configuration.

    Attributes:
        api_key: NewsAPI.org API key
        page_size: Number of articles requested per query (max 100)
        language: ISO-639-1 language filter
        sort_by: Sort order (publishedAt, relevancy, popularity)
        timeout_seconds: Total HTTP timeout for a single request
        rate_limit_per_minute: Requests allowed per minute before answering 429
            locally (None leaves throttling to NewsAPI)
    """

    api_key: Optional[str] = None
    page_size: int = 30
    language: str = "en"
    sort_by: str = "publishedAt"
    timeout_seconds: float = 15.0
    rate_limit_per_minute: Optional[int] = None
