"""
FastAPI server exposing ticker sentiment over HTTP.

Run with: uvicorn ticker_sentiment.api.server:app --host 0.0.0.0 --port 5000
"""

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ticker_sentiment import __version__
from ticker_sentiment.exceptions import ConfigurationError, NewsFetchError, TickerSentimentError
from ticker_sentiment.research.config import ResearchConfig, load_research_config
from ticker_sentiment.research.news_analyzer import TickerSentimentAnalyzer

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    body = {"error": error}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _get_analyzer(app: FastAPI) -> TickerSentimentAnalyzer:
    # Built on first use so the server can start without a NewsAPI key
    if app.state.analyzer is None:
        app.state.analyzer = TickerSentimentAnalyzer(app.state.config)
    return app.state.analyzer


def create_app(
    config: Optional[ResearchConfig] = None,
    analyzer: Optional[TickerSentimentAnalyzer] = None,
) -> FastAPI:
    """Build the API application.

    Args:
        config: Research configuration (defaults to environment)
        analyzer: Pre-built analyzer, mainly for tests

    Returns:
        FastAPI application
    """
    if config is None:
        load_dotenv()
        config = load_research_config()

    app = FastAPI(
        title="Ticker Sentiment API",
        description="News sentiment signals for stock tickers",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.analyzer = analyzer

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"ok": True}

    @app.get("/api/sentiment")
    async def get_sentiment(request: Request, ticker: Optional[str] = None, company: Optional[str] = None):
        """Aggregate recent news sentiment for a ticker."""
        if not ticker or not ticker.strip():
            return _error(400, "ticker query param is required")

        try:
            sentiment_analyzer = _get_analyzer(request.app)
            report = await sentiment_analyzer.analyze(ticker, company)
        except ConfigurationError as e:
            return _error(500, str(e))
        except NewsFetchError as e:
            return _error(e.status_code or 502, "NewsAPI error", e.detail)
        except TickerSentimentError as e:
            logger.error(f"Sentiment aggregation failed for {ticker}: {e}")
            return _error(500, "Server error", str(e))
        except Exception as e:
            logger.exception(f"Unexpected error for {ticker}")
            return _error(500, "Server error", str(e) or e.__class__.__name__)

        return report.to_dict()

    return app


app = create_app()
