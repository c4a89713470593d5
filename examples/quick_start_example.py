"""
Quick Start Example - Offline Sentiment Aggregation

This example aggregates a handful of hand-written headlines with the VADER
scorer, without calling any news API. Useful for seeing how the signal,
confidence and rolling series respond to different headlines.

Usage:
    python examples/quick_start_example.py
"""

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add parent directory to path to import ticker_sentiment
sys.path.insert(0, str(Path(__file__).parent.parent))

from ticker_sentiment.data_pipeline.sources.news.models import NewsArticle  # noqa: E402
from ticker_sentiment.research.sentiment import SentimentAggregator  # noqa: E402
from ticker_sentiment.research.sentiment.vader_analyzer import VADERSentimentAnalyzer  # noqa: E402

HEADLINES = [
    ("Apple posts record quarterly revenue", "iPhone sales beat analyst expectations", "Reuters", 30),
    ("Apple faces antitrust lawsuit in Europe", "Regulators allege unfair app store practices", "Bloomberg", 2),
    ("Apple unveils new MacBook lineup", "Prices start at $1,299", "The Verge", 12),
    ("Analysts upgrade Apple to strong buy", "Services growth seen as a major win", "CNBC", 6),
]


def quick_start_aggregation():
    """Aggregate sample headlines and print the result."""
    now = datetime.now(timezone.utc)
    articles = [
        NewsArticle(
            title=title,
            description=description,
            source=source,
            published_at=now - timedelta(hours=hours_ago),
            url=f"https://example.com/{i}",
        )
        for i, (title, description, source, hours_ago) in enumerate(HEADLINES)
    ]

    aggregator = SentimentAggregator(VADERSentimentAnalyzer())
    result = aggregator.aggregate(articles)

    print("=" * 70)
    print(f"Signal: {result.summary.label.value.upper()}  Confidence: {result.summary.confidence}/100")
    print(f"Average compound: {result.summary.avg_compound:+.3f}")
    print("=" * 70)
    for article in result.articles:
        print(f"  {article.sentiment_score:+.3f}  {article.sentiment_label.value:<8}  {article.title}")
    print()
    print("Rolling average (oldest first):")
    print(json.dumps([point.to_dict() for point in result.timeseries], indent=2))


if __name__ == "__main__":
    quick_start_aggregation()
