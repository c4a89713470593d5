"""Data models for scored articles and aggregation results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ticker_sentiment.data_pipeline.sources.news.models import NewsArticle


class SentimentLabel(str, Enum):
    """Sentiment classification of a single article."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SignalLabel(str, Enum):
    """Directional trading signal for a batch of articles."""

    BUY = "buy"
    SELL = "sell"
    NEUTRAL = "neutral"


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


@dataclass(frozen=True)
class ScoredArticle:
    """A raw article plus its compound sentiment score and label."""

    title: str
    description: str
    source: str
    published_at: Optional[datetime]
    url: str
    sentiment_score: float  # -1.0 to +1.0
    sentiment_label: SentimentLabel

    @classmethod
    def from_article(cls, article: NewsArticle, score: float, label: SentimentLabel) -> "ScoredArticle":
        return cls(
            title=article.title or "",
            description=article.description or "",
            source=article.source or "Unknown",
            published_at=article.published_at,
            url=article.url or "",
            sentiment_score=score,
            sentiment_label=label,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "publishedAt": _isoformat(self.published_at),
            "description": self.description,
            "sentimentScore": self.sentiment_score,
            "sentimentLabel": self.sentiment_label.value,
        }


@dataclass(frozen=True)
class SentimentBreakdown:
    """Positive/neutral/negative article counts; they sum to the batch size."""

    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def to_dict(self) -> Dict[str, int]:
        return {"positive": self.positive, "neutral": self.neutral, "negative": self.negative}


@dataclass(frozen=True)
class AggregateSummary:
    """Tradable conclusion drawn from a batch of scored articles."""

    label: SignalLabel = SignalLabel.NEUTRAL
    confidence: int = 0  # 0 to 100
    avg_compound: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label.value,
            "confidence": self.confidence,
            "avgCompound": self.avg_compound,
        }


@dataclass(frozen=True)
class TimeseriesPoint:
    """Cumulative average sentiment up to and including the article at ``t``."""

    t: datetime
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"t": _isoformat(self.t), "value": self.value}


@dataclass(frozen=True)
class AggregationResult:
    """Everything derived from one aggregation call."""

    summary: AggregateSummary = field(default_factory=AggregateSummary)
    breakdown: SentimentBreakdown = field(default_factory=SentimentBreakdown)
    timeseries: List[TimeseriesPoint] = field(default_factory=list)
    articles: List[ScoredArticle] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.articles

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the JSON field names of the HTTP response."""
        return {
            "summary": self.summary.to_dict(),
            "breakdown": self.breakdown.to_dict(),
            "timeseries": [point.to_dict() for point in self.timeseries],
            "articles": [article.to_dict() for article in self.articles],
        }
