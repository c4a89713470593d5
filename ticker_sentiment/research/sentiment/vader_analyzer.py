"""VADER sentiment analyzer implementation."""

import logging
from typing import Dict, List

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .base_analyzer import TextScorer

logger = logging.getLogger(__name__)


class VADERSentimentAnalyzer(TextScorer):
    """VADER-based text scorer using the stock VADER lexicon."""

    def __init__(self):
        self.analyzer = SentimentIntensityAnalyzer()
        logger.info(f"VADER analyzer initialized with {len(self.analyzer.lexicon)} lexicon terms")

    def polarity_scores(self, text: str) -> Dict[str, float]:
        """Analyze sentiment of text.

        Args:
            text: Text to analyze

        Returns:
            Dict with ``neg``, ``neu``, ``pos`` proportions and the ``compound``
            score in [-1, 1]
        """
        return self.analyzer.polarity_scores(text or "")

    def analyze_batch(self, texts: List[str]) -> List[float]:
        """Return the compound score of each text, in order."""
        return [self.compound(text) for text in texts]
