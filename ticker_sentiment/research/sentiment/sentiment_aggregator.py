"""Sentiment aggregator turning a batch of articles into a trading signal."""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ticker_sentiment.data_pipeline.sources.news.models import NewsArticle
from ticker_sentiment.exceptions import MalformedArticleError, ScorerError

from ..config import SentimentConfig
from .base_analyzer import TextScorer
from .models import (
    AggregateSummary,
    AggregationResult,
    ScoredArticle,
    SentimentBreakdown,
    SentimentLabel,
    SignalLabel,
    TimeseriesPoint,
)

logger = logging.getLogger(__name__)

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05
MAGNITUDE_WEIGHT = 0.7
SKEW_WEIGHT = 0.3


def label_from_score(
    compound: float,
    positive_threshold: float = POSITIVE_THRESHOLD,
    negative_threshold: float = NEGATIVE_THRESHOLD,
) -> SentimentLabel:
    """Classify a compound score; both thresholds are inclusive."""
    if compound >= positive_threshold:
        return SentimentLabel.POSITIVE
    if compound <= negative_threshold:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def signal_from_aggregate(
    avg_compound: float,
    pos_count: int,
    neg_count: int,
    positive_threshold: float = POSITIVE_THRESHOLD,
    negative_threshold: float = NEGATIVE_THRESHOLD,
) -> SignalLabel:
    """Derive the directional signal from the average score and label counts.

    The average decides first. Inside the near-neutral band the article
    counts break the tie, so a skewed distribution is not hidden by a
    marginal average.
    """
    if avg_compound >= positive_threshold and pos_count >= neg_count:
        return SignalLabel.BUY
    if avg_compound <= negative_threshold and neg_count >= pos_count:
        return SignalLabel.SELL
    if pos_count > neg_count:
        return SignalLabel.BUY
    if neg_count > pos_count:
        return SignalLabel.SELL
    return SignalLabel.NEUTRAL


def to_confidence(
    avg_compound: float,
    pos_pct: float,
    neg_pct: float,
    magnitude_weight: float = MAGNITUDE_WEIGHT,
    skew_weight: float = SKEW_WEIGHT,
) -> int:
    """Map average magnitude and distribution skew to an integer in [0, 100].

    Rounds half up, so 78.5 becomes 79.
    """
    mag = min(abs(avg_compound), 1.0)
    skew = abs(pos_pct - neg_pct)
    raw = (magnitude_weight * mag + skew_weight * skew) * 100
    return int(min(max(math.floor(raw + 0.5), 0), 100))


def _validate_compound(compound: object, text: str) -> float:
    if isinstance(compound, bool):
        raise ScorerError(f"Scorer returned a boolean compound score: {compound!r}", text=text)
    try:
        value = float(compound)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ScorerError(f"Scorer returned a non-numeric compound score: {compound!r}", text=text) from e
    if not math.isfinite(value) or not -1.0 <= value <= 1.0:
        raise ScorerError(f"Scorer returned a compound score outside [-1, 1]: {value!r}", text=text, score=value)
    return value


def score_article(
    article: NewsArticle,
    scorer: TextScorer,
    positive_threshold: float = POSITIVE_THRESHOLD,
    negative_threshold: float = NEGATIVE_THRESHOLD,
) -> ScoredArticle:
    """Score one article's title and description and label the result.

    Raises:
        ScorerError: If the scorer raises or returns an unusable score
    """
    text = article.text
    try:
        scores = scorer.polarity_scores(text)
        compound = scores["compound"]
    except ScorerError:
        raise
    except Exception as e:
        raise ScorerError(f"Scorer failed: {e}", text=text) from e

    score = _validate_compound(compound, text)
    label = label_from_score(score, positive_threshold, negative_threshold)
    return ScoredArticle.from_article(article, score, label)


def _sort_key(published_at: datetime) -> datetime:
    # Naive timestamps are taken as UTC so they compare with aware ones
    if published_at.tzinfo is None:
        return published_at.replace(tzinfo=timezone.utc)
    return published_at


def rolling_timeseries(scored: Sequence[ScoredArticle]) -> List[TimeseriesPoint]:
    """Cumulative average of scores in publish-time order.

    Works on a sorted copy; the input sequence is left untouched.
    """
    ordered = sorted(scored, key=lambda a: _sort_key(a.published_at))  # type: ignore[arg-type]
    points = []
    running_sum = 0.0
    for i, article in enumerate(ordered, start=1):
        running_sum += article.sentiment_score
        points.append(TimeseriesPoint(t=article.published_at, value=running_sum / i))  # type: ignore[arg-type]
    return points


class SentimentAggregator:
    """Aggregate per-article sentiment into a signal, confidence and series."""

    def __init__(self, scorer: TextScorer, config: Optional[SentimentConfig] = None):
        """Initialize aggregator.

        Args:
            scorer: Per-text scorer used for every article
            config: Thresholds, confidence weights and scoring parallelism
        """
        self.scorer = scorer
        self.config = config or SentimentConfig()

    def score_article(self, article: NewsArticle) -> ScoredArticle:
        return score_article(
            article,
            self.scorer,
            self.config.positive_threshold,
            self.config.negative_threshold,
        )

    def score_articles(self, articles: Sequence[NewsArticle]) -> List[ScoredArticle]:
        """Score articles independently; the output keeps input order."""
        max_workers = self.config.max_workers
        if max_workers is None or max_workers <= 1 or len(articles) <= 1:
            return [self.score_article(article) for article in articles]

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.score_article, articles))

    def aggregate(self, articles: Sequence[NewsArticle]) -> AggregationResult:
        """Aggregate a batch of raw articles.

        An empty batch is a valid neutral result, not an error.

        Args:
            articles: Articles in the order received from the provider

        Returns:
            AggregationResult with summary, breakdown, timeseries and scored articles

        Raises:
            MalformedArticleError: If any article has no publish timestamp
            ScorerError: If scoring any article fails
        """
        if not articles:
            logger.debug("No articles to aggregate, returning neutral result")
            return AggregationResult()

        for index, article in enumerate(articles):
            if article.published_at is None:
                raise MalformedArticleError(
                    f"Article {index} has no publish timestamp", index=index, url=article.url
                )

        scored = self.score_articles(articles)

        total = len(scored)
        pos = sum(1 for a in scored if a.sentiment_label == SentimentLabel.POSITIVE)
        neg = sum(1 for a in scored if a.sentiment_label == SentimentLabel.NEGATIVE)
        neu = total - pos - neg

        avg_compound = sum(a.sentiment_score for a in scored) / total
        signal = signal_from_aggregate(
            avg_compound,
            pos,
            neg,
            self.config.positive_threshold,
            self.config.negative_threshold,
        )
        confidence = to_confidence(
            avg_compound,
            pos / total,
            neg / total,
            self.config.magnitude_weight,
            self.config.skew_weight,
        )

        logger.debug(
            f"Aggregated {total} articles: avg={avg_compound:.4f} pos={pos} neu={neu} neg={neg} "
            f"-> {signal.value} ({confidence})"
        )

        return AggregationResult(
            summary=AggregateSummary(label=signal, confidence=confidence, avg_compound=avg_compound),
            breakdown=SentimentBreakdown(positive=pos, neutral=neu, negative=neg),
            timeseries=rolling_timeseries(scored),
            articles=scored,
        )


def aggregate(
    articles: Sequence[NewsArticle],
    scorer: TextScorer,
    config: Optional[SentimentConfig] = None,
) -> AggregationResult:
    """Aggregate articles with a one-off SentimentAggregator."""
    return SentimentAggregator(scorer, config).aggregate(articles)
