"""Sentiment analysis modules."""

from .base_analyzer import FunctionScorer, TextScorer
from .models import (
    AggregateSummary,
    AggregationResult,
    ScoredArticle,
    SentimentBreakdown,
    SentimentLabel,
    SignalLabel,
    TimeseriesPoint,
)
from .sentiment_aggregator import (
    SentimentAggregator,
    aggregate,
    label_from_score,
    rolling_timeseries,
    score_article,
    signal_from_aggregate,
    to_confidence,
)

__all__ = [
    "TextScorer",
    "FunctionScorer",
    "SentimentLabel",
    "SignalLabel",
    "ScoredArticle",
    "SentimentBreakdown",
    "AggregateSummary",
    "TimeseriesPoint",
    "AggregationResult",
    "SentimentAggregator",
    "aggregate",
    "score_article",
    "label_from_score",
    "signal_from_aggregate",
    "to_confidence",
    "rolling_timeseries",
]
