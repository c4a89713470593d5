"""Test utilities for ticker sentiment tests."""

from .test_helpers import BASE_TIME, StubScorer, create_sample_article, create_scored_batch

__all__ = [
    "BASE_TIME",
    "StubScorer",
    "create_sample_article",
    "create_scored_batch",
]
