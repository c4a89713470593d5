"""News-driven sentiment signals for stock tickers."""

__version__ = "0.1.0"
