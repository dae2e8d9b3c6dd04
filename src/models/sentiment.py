"""
Sentiment data model.

Five ordered sentiment categories and the per-sentence output of an engine.
"""

from dataclasses import dataclass
from enum import Enum


class SentimentLabel(str, Enum):
    """
    Sentiment category, ordered from very positive to very negative.
    The value equals the name so labels render verbatim in the report.
    """
    VERY_POSITIVE = "VERY_POSITIVE"
    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"
    VERY_NEGATIVE = "VERY_NEGATIVE"

    @property
    def severity(self) -> int:
        """0 for VERY_NEGATIVE up to 4 for VERY_POSITIVE."""
        return _SEVERITY[self]

    @classmethod
    def parse(cls, text: str) -> "SentimentLabel":
        """
        Normalize an engine label to a SentimentLabel.

        Accepts "POSITIVE", "very_negative", "Very positive", "very-negative".

        Raises:
            ValueError: If the text is not one of the five categories
        """
        if text is None:
            raise ValueError("Sentiment label is missing")

        key = text.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Invalid sentiment label: {text!r}. "
                f"Must be one of {', '.join(label.value for label in cls)}"
            )

    def __str__(self) -> str:
        return self.value


_SEVERITY = {
    SentimentLabel.VERY_NEGATIVE: 0,
    SentimentLabel.NEGATIVE: 1,
    SentimentLabel.NEUTRAL: 2,
    SentimentLabel.POSITIVE: 3,
    SentimentLabel.VERY_POSITIVE: 4,
}


@dataclass(frozen=True)
class SentenceSentiment:
    """
    One labeled sub-span (usually a sentence) returned by a sentiment engine.
    """
    text: str
    label: SentimentLabel
