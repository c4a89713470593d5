"""Custom exception classes for ticker sentiment analysis.

This module provides specific exception types for the failure modes of the
aggregation pipeline and its collaborators, so callers can tell a valid
empty result apart from a result that could not be produced.
"""

from typing import Optional


class TickerSentimentError(Exception):
    """Base exception for all ticker sentiment errors."""
    pass


class ScorerError(TickerSentimentError):
    """Raised when the text scorer fails or returns an unusable score."""

    def __init__(self, message: str, text: Optional[str] = None, score: Optional[float] = None):
        super().__init__(message)
        self.text = text
        self.score = score


class MalformedArticleError(TickerSentimentError):
    """Raised when an article lacks data the aggregation depends on."""

    def __init__(self, message: str, index: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.index = index
        self.url = url


class NewsFetchError(TickerSentimentError):
    """Raised when the news provider could not return articles."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.source = source
        self.status_code = status_code
        self.detail = detail


class ConfigurationError(TickerSentimentError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
