"""Abstract base class for news data sources."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from ...exceptions import APIRateLimitError
from .models import NewsFetchResult


class BaseNewsSource(ABC):
    """Abstract base class for news data sources."""

    def __init__(self, api_key: Optional[str] = None, rate_limit_per_minute: Optional[int] = None):
        self.api_key = api_key
        self.rate_limit_per_minute = rate_limit_per_minute
        self._last_request_time: Optional[datetime] = None
        self._request_count: int = 0

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the name of this news source."""
        pass

    @abstractmethod
    async def fetch_articles(
        self,
        ticker: str,
        company: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> NewsFetchResult:
        """Fetch recent news articles about a ticker.

        Args:
            ticker: Upper-cased ticker symbol
            company: Company name to search for (defaults to the ticker)
            page_size: Maximum articles to return (defaults to the source's setting)

        Returns:
            NewsFetchResult with fetched articles, or success=False on failure
        """
        pass

    def _respect_rate_limit(self) -> None:
        """Count a request against the per-minute budget.

        Raises:
            APIRateLimitError: If the budget for the current minute is spent
        """
        if not self.rate_limit_per_minute:
            return

        now = datetime.now()
        # Reset counter if a minute has passed
        if self._last_request_time is None or now - self._last_request_time > timedelta(minutes=1):
            self._last_request_time = now
            self._request_count = 0

        if self._request_count >= self.rate_limit_per_minute:
            retry_after = max(60 - (now - self._last_request_time).seconds, 1)
            raise APIRateLimitError(
                f"{self.source_name} rate limit of {self.rate_limit_per_minute}/min reached",
                status_code=429,
                detail=f"Rate limit reached, retry in {retry_after}s",
            )

        self._request_count += 1
