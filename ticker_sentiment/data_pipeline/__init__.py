"""Data pipeline module for fetching news articles from providers."""

from ticker_sentiment.data_pipeline.config import NewsAPIConfig
from ticker_sentiment.data_pipeline.exceptions import (
    APIRateLimitError,
    DataPipelineError,
    DataValidationError,
)

__all__ = [
    "NewsAPIConfig",
    "DataPipelineError",
    "APIRateLimitError",
    "DataValidationError",
]
