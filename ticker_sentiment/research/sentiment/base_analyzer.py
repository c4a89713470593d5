"""Abstract base class for per-text sentiment scorers."""

from abc import ABC, abstractmethod
from typing import Callable, Mapping, Union


class TextScorer(ABC):
    """Maps a text to polarity scores including a bounded ``compound`` score."""

    @abstractmethod
    def polarity_scores(self, text: str) -> Mapping[str, float]:
        """Score a text.

        Args:
            text: Text to analyze (may be empty)

        Returns:
            Mapping with at least a ``"compound"`` key holding a float in [-1, 1]
        """

    def compound(self, text: str) -> float:
        """Return only the compound score of a text."""
        return float(self.polarity_scores(text)["compound"])


class FunctionScorer(TextScorer):
    """Adapt a plain callable into a TextScorer.

    The callable may return either a float compound score or a mapping with a
    ``"compound"`` key.
    """

    def __init__(self, fn: Callable[[str], Union[float, Mapping[str, float]]]):
        self.fn = fn

    def polarity_scores(self, text: str) -> Mapping[str, float]:
        result = self.fn(text)
        if isinstance(result, Mapping):
            return result
        # Validated by the aggregator, not coerced here
        return {"compound": result}
