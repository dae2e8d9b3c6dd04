"""
VADER Sentiment Engine.

Offline sentence-level sentiment using the VADER lexicon.
"""

import logging
from typing import List
import nltk
from nltk.tokenize import sent_tokenize
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from src.models.sentiment import SentenceSentiment, SentimentLabel

logger = logging.getLogger(__name__)


# Punkt sentence models (punkt_tab is required by NLTK 3.9+)
NLTK_RESOURCES = [
    ('tokenizers/punkt', 'punkt'),
    ('tokenizers/punkt_tab', 'punkt_tab'),
]


def ensure_nltk_resources() -> None:
    """Download the Punkt sentence models if they are not installed."""
    for path, name in NLTK_RESOURCES:
        try:
            nltk.data.find(path)
        except LookupError:
            logger.info(f"Downloading NLTK resource: {name}")
            nltk.download(name, quiet=True)


def split_sentences(text: str) -> List[str]:
    """Split text into sentences with the Punkt tokenizer."""
    if not text or not text.strip():
        return []
    return [s.strip() for s in sent_tokenize(text.strip()) if s.strip()]


class VaderSentimentEngine:
    """
    Maps each sentence's VADER compound score onto five labels.

    Thresholds (compound score in [-1, 1]):
        >= very_positive_threshold  -> VERY_POSITIVE
        >= positive_threshold       -> POSITIVE
        >  negative_threshold       -> NEUTRAL
        >  very_negative_threshold  -> NEGATIVE
        otherwise                   -> VERY_NEGATIVE
    """

    def __init__(
        self,
        very_positive_threshold: float = 0.6,
        positive_threshold: float = 0.05,
        negative_threshold: float = -0.05,
        very_negative_threshold: float = -0.6
    ):
        if not (very_negative_threshold < negative_threshold
                <= positive_threshold < very_positive_threshold):
            raise ValueError(
                "VADER thresholds must satisfy "
                "very_negative < negative <= positive < very_positive"
            )

        self.very_positive_threshold = very_positive_threshold
        self.positive_threshold = positive_threshold
        self.negative_threshold = negative_threshold
        self.very_negative_threshold = very_negative_threshold

        ensure_nltk_resources()
        self.analyser = SentimentIntensityAnalyzer()

        logger.info("Initialized VaderSentimentEngine")

    def analyze(self, text: str) -> List[SentenceSentiment]:
        """
        Label each sentence of the text.

        Returns:
            Labeled sentences in order (empty for blank text)
        """
        results = []
        for sentence in split_sentences(text):
            compound = self.analyser.polarity_scores(sentence)["compound"]
            results.append(SentenceSentiment(text=sentence, label=self.label_for(compound)))
        return results

    def label_for(self, compound: float) -> SentimentLabel:
        """Map a compound score to a sentiment label."""
        if compound >= self.very_positive_threshold:
            return SentimentLabel.VERY_POSITIVE
        if compound >= self.positive_threshold:
            return SentimentLabel.POSITIVE
        if compound > self.negative_threshold:
            return SentimentLabel.NEUTRAL
        if compound > self.very_negative_threshold:
            return SentimentLabel.NEGATIVE
        return SentimentLabel.VERY_NEGATIVE
