"""Tests for text scorers."""

import pytest

from ticker_sentiment.research.sentiment.base_analyzer import FunctionScorer, TextScorer
from ticker_sentiment.research.sentiment.vader_analyzer import VADERSentimentAnalyzer


class TestTextScorer:
    """Tests for the scorer interface and adapters."""

    def test_cannot_instantiate_abstract_scorer(self):
        with pytest.raises(TypeError):
            TextScorer()  # type: ignore[abstract]

    def test_function_scorer_wraps_float(self):
        scorer = FunctionScorer(lambda text: 0.25)
        assert scorer.polarity_scores("anything") == {"compound": 0.25}
        assert scorer.compound("anything") == 0.25

    def test_function_scorer_passes_mapping_through(self):
        scores = {"compound": -0.4, "neg": 0.6}
        scorer = FunctionScorer(lambda text: scores)
        assert scorer.polarity_scores("anything") is scores
        assert scorer.compound("anything") == -0.4


class TestVADERSentimentAnalyzer:
    """Tests for VADER sentiment analyzer."""

    @pytest.fixture(scope="class")
    def analyzer(self):
        """Create a VADER analyzer instance."""
        return VADERSentimentAnalyzer()

    def test_returns_vader_keys(self, analyzer):
        scores = analyzer.polarity_scores("Apple stock surges on strong earnings")
        assert set(scores) >= {"neg", "neu", "pos", "compound"}
        assert -1.0 <= scores["compound"] <= 1.0

    def test_empty_text_is_neutral(self, analyzer):
        assert analyzer.compound("") == 0.0
        assert analyzer.compound(". ") == 0.0

    def test_positive_sentiment(self, analyzer):
        assert analyzer.compound("Great results, investors are happy and optimistic") > 0.3

    def test_negative_sentiment(self, analyzer):
        assert analyzer.compound("Terrible losses, the company faces a horrible lawsuit") < -0.3

    def test_neutral_sentiment(self, analyzer):
        assert -0.05 < analyzer.compound("The market opened at 9:30 AM today.") < 0.05

    def test_deterministic(self, analyzer):
        text = "Shares fell sharply after the weak guidance"
        assert analyzer.compound(text) == analyzer.compound(text)

    def test_analyze_batch(self, analyzer):
        texts = ["Great news", "Awful news", "News"]
        results = analyzer.analyze_batch(texts)

        assert len(results) == 3
        assert all(isinstance(score, float) for score in results)
        assert results[0] > 0 > results[1]
