"""News data source implementations."""

from .base_news_source import BaseNewsSource
from .models import NewsArticle, NewsFetchResult
from .newsapi_client import NewsAPIClient

__all__ = [
    "NewsArticle",
    "NewsFetchResult",
    "BaseNewsSource",
    "NewsAPIClient",
]
