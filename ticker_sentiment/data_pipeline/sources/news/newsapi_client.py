"""NewsAPI client implementation."""

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

import aiohttp

from ...config import NewsAPIConfig
from ...exceptions import APIRateLimitError, DataPipelineError, DataValidationError
from .base_news_source import BaseNewsSource
from .models import NewsArticle, NewsFetchResult

logger = logging.getLogger(__name__)


def build_query(ticker: str, company: Optional[str] = None) -> str:
    """Build the /everything search query for a ticker.

    The company name is quoted so multi-word names match as a phrase.
    """
    return f'"{company or ticker}" OR {ticker}'


_ISO_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:?\d{2})?$"
)


def parse_published_at(value: Optional[str]) -> Optional[datetime]:
    """Parse a NewsAPI ``publishedAt`` string into a datetime.

    Fractional seconds of any length are accepted (truncated to
    microseconds) and ``Z`` or ``+0000`` offsets are normalized before
    ``datetime.fromisoformat``, which is strict about both before 3.11.

    Returns None when the value is missing or unparseable; callers decide
    what an undated article means.
    """
    if not value:
        return None

    match = _ISO_TIMESTAMP.match(value.strip())
    if match is None:
        logger.warning(f"Unparseable publishedAt value: {value!r}")
        return None

    normalized = match.group("base")
    fraction = match.group("fraction")
    if fraction:
        normalized += "." + (fraction + "000000")[:6]
    offset = match.group("offset")
    if offset == "Z":
        normalized += "+00:00"
    elif offset:
        normalized += offset if ":" in offset else f"{offset[:3]}:{offset[3:]}"

    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        logger.warning(f"Unparseable publishedAt value: {value!r}")
        return None


class NewsAPIClient(BaseNewsSource):
    """Client for NewsAPI.org."""

    BASE_URL = "https://newsapi.org/v2"

    def __init__(self, api_key: str, config: Optional[NewsAPIConfig] = None):
        """Initialize NewsAPI client.

        Args:
            api_key: NewsAPI.org API key
            config: Request settings (page size, language, timeout, rate limit)

        Raises:
            ValueError: If the API key is empty
        """
        self.config = config or NewsAPIConfig(api_key=api_key)
        super().__init__(api_key, self.config.rate_limit_per_minute)
        if not api_key:
            raise ValueError("NewsAPI API key is required")

    @property
    def source_name(self) -> str:
        """Return the name of this news source."""
        return "NewsAPI"

    async def fetch_articles(
        self,
        ticker: str,
        company: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> NewsFetchResult:
        """Fetch the most recent articles mentioning a ticker or company.

        Args:
            ticker: Upper-cased ticker symbol
            company: Company name to search for (defaults to the ticker)
            page_size: Maximum articles to return (defaults to config.page_size)

        Returns:
            NewsFetchResult; success is False when the request failed
        """
        query = build_query(ticker, company)

        try:
            self._respect_rate_limit()
            articles = await self._search_everything(
                query=query,
                page_size=page_size or self.config.page_size,
            )
        except DataPipelineError as e:
            logger.error(f"Error fetching news for {ticker}: {e}")
            return NewsFetchResult(
                articles=[],
                source=self.source_name,
                query=query,
                success=False,
                error_message=e.detail or str(e),
                status_code=e.status_code,
            )
        except aiohttp.ClientError as e:
            logger.error(f"Network error fetching news for {ticker}: {e}")
            return NewsFetchResult(
                articles=[],
                source=self.source_name,
                query=query,
                success=False,
                error_message=str(e),
                status_code=502,
            )

        logger.info(f"Fetched {len(articles)} articles for {ticker} from {self.source_name}")
        return NewsFetchResult(articles=articles, source=self.source_name, query=query)

    async def _search_everything(self, query: str, page_size: int = 30) -> List[NewsArticle]:
        """Search all articles using /everything endpoint.

        Args:
            query: Search query string
            page_size: Number of articles to return (max 100)

        Returns:
            List of NewsArticle objects

        Raises:
            APIRateLimitError: On HTTP 429
            DataPipelineError: On any other non-200 response
            DataValidationError: When the payload reports an error status
        """
        params = {
            "q": query,
            "sortBy": self.config.sort_by,
            "pageSize": str(min(page_size, 100)),
            "language": self.config.language,
        }
        headers = {"X-Api-Key": self.api_key}
        url = f"{self.BASE_URL}/everything"
        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url, params=params, headers=headers) as response:
                if response.status == 429:
                    text = await response.text()
                    raise APIRateLimitError("NewsAPI rate limit exceeded", status_code=429, detail=text)
                if response.status != 200:
                    text = await response.text()
                    raise DataPipelineError(
                        f"NewsAPI error {response.status}", status_code=response.status, detail=text
                    )

                data = await response.json()

                if data.get("status", "ok") != "ok":
                    message = data.get("message", "Unknown error")
                    raise DataValidationError(f"NewsAPI error: {message}", status_code=502, detail=message)

                return self._parse_articles(data.get("articles") or [])

    def _parse_articles(self, raw_articles: List[Dict[str, Any]]) -> List[NewsArticle]:
        """Parse raw API response into NewsArticle objects.

        Missing title, description and source are tolerated. A missing
        timestamp is kept as None rather than replaced.
        """
        articles = []

        for raw in raw_articles:
            source = raw.get("source") or {}
            articles.append(
                NewsArticle(
                    title=raw.get("title") or "",
                    description=raw.get("description") or "",
                    source=source.get("name") or "Unknown",
                    published_at=parse_published_at(raw.get("publishedAt")),
                    url=raw.get("url") or "",
                )
            )

        return articles
