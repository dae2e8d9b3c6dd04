"""
Sentiment Classifier Adapter.

Reduces an engine's per-sentence labels to a single label per comment.
"""

import logging
from collections import Counter
from typing import List

from src.models.feedback import FeedbackRecord
from src.models.sentiment import SentimentLabel

logger = logging.getLogger(__name__)


class SentimentClassifier:
    """
    Classifies a comment by the most frequent sentence label.

    The engine is injected once and shared read-only across calls. Any
    object with analyze(text) -> List[SentenceSentiment] will do.

    Rules:
    - No sentences -> NEUTRAL
    - Otherwise the mode of the sentence labels
    - Ties go to the most negative of the tied labels
    """

    def __init__(self, engine):
        self.engine = engine

    def classify(self, comment: str) -> SentimentLabel:
        """
        Classify a single comment.

        Args:
            comment: Free-text comment

        Returns:
            Record-level sentiment label
        """
        sentences = self.engine.analyze(comment)

        if not sentences:
            logger.debug("Engine returned no sentences, defaulting to NEUTRAL")
            return SentimentLabel.NEUTRAL

        return self._mode([s.label for s in sentences])

    def classify_records(self, records: List[FeedbackRecord]) -> List[FeedbackRecord]:
        """
        Attach a sentiment label to every record.

        Returns:
            New records in the same order, each carrying its sentiment
        """
        labeled = []
        for record in records:
            logger.debug(f"Analyzing sentiment for entry #{record.id}")
            labeled.append(record.with_sentiment(self.classify(record.comment)))

        logger.info(f"Classified {len(labeled)} feedback entries")
        return labeled

    @staticmethod
    def _mode(labels: List[SentimentLabel]) -> SentimentLabel:
        """Most frequent label; the lowest severity wins a tie."""
        counts = Counter(labels)
        return max(counts, key=lambda label: (counts[label], -label.severity))
