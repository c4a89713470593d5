"""Tests for ticker_sentiment."""
