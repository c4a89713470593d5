"""Data models for news articles and news fetch results."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class NewsArticle:
    """A raw news article as returned by a news provider."""

    title: str = ""
    description: str = ""
    source: str = "Unknown"  # e.g., "Reuters", "Bloomberg"
    published_at: Optional[datetime] = None
    url: str = ""

    @property
    def text(self) -> str:
        """Title and description joined the way they are scored."""
        return ". ".join([self.title or "", self.description or ""])


@dataclass
class NewsFetchResult:
    """Result of a news fetch operation."""

    articles: List[NewsArticle]
    source: str
    query: str = ""
    fetch_time: datetime = field(default_factory=datetime.now)
    success: bool = True
    error_message: Optional[str] = None
    status_code: Optional[int] = None
