"""Property-based tests for the sentiment aggregator using hypothesis."""

import json
import math

from hypothesis import given, settings
from hypothesis import strategies as st

from ticker_sentiment.research.sentiment.models import SignalLabel
from ticker_sentiment.research.sentiment.sentiment_aggregator import aggregate, label_from_score
from tests.utils import create_scored_batch


def compound_scores(min_size=0, max_size=40):
    """Generate lists of compound scores in [-1, 1]."""
    return st.lists(
        st.floats(min_value=-1.0, max_value=1.0, allow_nan=False, allow_infinity=False),
        min_size=min_size,
        max_size=max_size,
    )


def scored_batches(min_size=0, max_size=40):
    """Generate (compounds, hours_offsets) pairs of equal length."""
    return compound_scores(min_size, max_size).flatmap(
        lambda compounds: st.tuples(
            st.just(compounds),
            st.lists(
                st.integers(min_value=0, max_value=24 * 30),
                min_size=len(compounds),
                max_size=len(compounds),
            ),
        )
    )


class TestAggregatorProperties:
    """Invariants that hold for every batch."""

    @given(scored_batches())
    @settings(max_examples=100, deadline=5000)
    def test_breakdown_sums_to_article_count(self, batch):
        """Property: positive + neutral + negative == number of articles."""
        compounds, offsets = batch
        articles, scorer = create_scored_batch(compounds, offsets)
        result = aggregate(articles, scorer)

        breakdown = result.breakdown
        assert breakdown.positive + breakdown.neutral + breakdown.negative == len(articles)

    @given(scored_batches())
    @settings(max_examples=100, deadline=5000)
    def test_confidence_is_bounded_int(self, batch):
        """Property: confidence is an integer in [0, 100]."""
        compounds, offsets = batch
        articles, scorer = create_scored_batch(compounds, offsets)
        confidence = aggregate(articles, scorer).summary.confidence

        assert isinstance(confidence, int)
        assert 0 <= confidence <= 100

    @given(scored_batches())
    @settings(max_examples=100, deadline=5000)
    def test_timeseries_shape(self, batch):
        """Property: one point per article, in time order, ending at the average."""
        compounds, offsets = batch
        articles, scorer = create_scored_batch(compounds, offsets)
        result = aggregate(articles, scorer)

        assert len(result.timeseries) == len(articles)
        times = [point.t for point in result.timeseries]
        assert times == sorted(times)
        for point in result.timeseries:
            assert -1.0 - 1e-9 <= point.value <= 1.0 + 1e-9
        if result.timeseries:
            assert math.isclose(result.timeseries[-1].value, result.summary.avg_compound, abs_tol=1e-9)

    @given(scored_batches(min_size=1))
    @settings(max_examples=100, deadline=5000)
    def test_articles_keep_input_order(self, batch):
        """Property: returned articles follow input order regardless of publish times."""
        compounds, offsets = batch
        articles, scorer = create_scored_batch(compounds, offsets)
        result = aggregate(articles, scorer)

        assert [a.title for a in result.articles] == [a.title for a in articles]
        assert [a.sentiment_score for a in result.articles] == compounds

    @given(scored_batches())
    @settings(max_examples=50, deadline=5000)
    def test_idempotent(self, batch):
        """Property: aggregating twice yields identical serialized output."""
        compounds, offsets = batch
        articles, scorer = create_scored_batch(compounds, offsets)

        assert json.dumps(aggregate(articles, scorer).to_dict()) == json.dumps(aggregate(articles, scorer).to_dict())

    @given(compound_scores(min_size=1))
    @settings(max_examples=100, deadline=5000)
    def test_signal_agrees_with_unanimous_labels(self, compounds):
        """Property: if no article is negative and one is positive, the signal is buy."""
        labels = [label_from_score(c).value for c in compounds]
        articles, scorer = create_scored_batch(compounds)
        result = aggregate(articles, scorer)

        if "negative" not in labels and "positive" in labels:
            assert result.summary.label == SignalLabel.BUY
        if "positive" not in labels and "negative" in labels:
            assert result.summary.label == SignalLabel.SELL
