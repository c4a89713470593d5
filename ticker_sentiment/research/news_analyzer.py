"""Main orchestrator for ticker news sentiment analysis."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ticker_sentiment.data_pipeline.sources.news import BaseNewsSource, NewsAPIClient
from ticker_sentiment.exceptions import ConfigurationError, NewsFetchError
from ticker_sentiment.logging.logger import PerformanceContext, log_signal_summary

from .config import ResearchConfig
from .sentiment.base_analyzer import TextScorer
from .sentiment.models import AggregationResult
from .sentiment.sentiment_aggregator import SentimentAggregator

logger = logging.getLogger(__name__)


@dataclass
class TickerSentimentReport:
    """Aggregation result for one ticker query."""

    ticker: str
    company: str
    result: AggregationResult

    def to_dict(self) -> Dict[str, Any]:
        return {"ticker": self.ticker, "company": self.company, **self.result.to_dict()}


class TickerSentimentAnalyzer:
    """Fetch news for a ticker and aggregate it into a sentiment signal."""

    def __init__(
        self,
        config: ResearchConfig,
        news_source: Optional[BaseNewsSource] = None,
        scorer: Optional[TextScorer] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Research configuration
            news_source: News provider (defaults to NewsAPI with config.news)
            scorer: Per-text scorer (defaults to VADER)

        Raises:
            ConfigurationError: If no news source is given and no NewsAPI key is configured
        """
        self.config = config

        if news_source is None:
            if not config.newsapi_key:
                raise ConfigurationError("Missing NEWSAPI_KEY in server environment.", field="NEWSAPI_KEY")
            news_source = NewsAPIClient(api_key=config.newsapi_key, config=config.news)
        self.news_source = news_source

        if scorer is None:
            from .sentiment.vader_analyzer import VADERSentimentAnalyzer

            scorer = VADERSentimentAnalyzer()
        self.aggregator = SentimentAggregator(scorer, config.sentiment)

        logger.info(f"TickerSentimentAnalyzer initialized with source {self.news_source.source_name}")

    async def analyze(self, ticker: str, company: Optional[str] = None) -> TickerSentimentReport:
        """Fetch recent news for a ticker and aggregate its sentiment.

        Args:
            ticker: Ticker symbol (case-insensitive)
            company: Company name to search for (defaults to the ticker)

        Returns:
            TickerSentimentReport; an empty fetch yields a neutral result

        Raises:
            NewsFetchError: If the news provider failed
            ScorerError: If scoring an article failed
            MalformedArticleError: If an article has no publish timestamp
        """
        ticker = ticker.strip().upper()
        company = (company or "").strip() or ticker

        fetch_result = await self.news_source.fetch_articles(ticker, company)
        if not fetch_result.success:
            raise NewsFetchError(
                f"{fetch_result.source} error",
                source=fetch_result.source,
                status_code=fetch_result.status_code,
                detail=fetch_result.error_message,
            )

        with PerformanceContext(logger, f"aggregate:{ticker}", log_memory=self.config.logging.log_memory):
            result = self.aggregator.aggregate(fetch_result.articles)

        log_signal_summary(logger, ticker, result, company=company, query=fetch_result.query)
        return TickerSentimentReport(ticker=ticker, company=company, result=result)
