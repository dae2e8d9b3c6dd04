"""
Unit tests for the VADER Sentiment Engine.
"""

import pytest
from unittest.mock import patch
from src.engines.vader import VaderSentimentEngine, ensure_nltk_resources, split_sentences
from src.models.sentiment import SentimentLabel


@pytest.fixture(scope="module", autouse=True)
def punkt_models():
    """Sentence splitting needs the Punkt models installed."""
    ensure_nltk_resources()


@pytest.fixture
def engine():
    return VaderSentimentEngine()


def test_split_sentences():
    assert split_sentences("Great staff! Long wait. Would I come back? Yes") == [
        "Great staff!",
        "Long wait.",
        "Would I come back?",
        "Yes",
    ]
    assert split_sentences("") == []
    assert split_sentences("   ") == []


def test_split_keeps_abbreviations_in_sentence():
    assert split_sentences("Dr. Smith was great. Thanks.") == [
        "Dr. Smith was great.",
        "Thanks.",
    ]


def test_split_keeps_decimals_in_sentence():
    assert split_sentences("I rate it 3.5 stars. The staff were kind.") == [
        "I rate it 3.5 stars.",
        "The staff were kind.",
    ]


def test_split_needs_space_after_punctuation():
    assert split_sentences("Great service.Thanks again") == ["Great service.Thanks again"]


@pytest.mark.parametrize("compound, expected", [
    (0.9, SentimentLabel.VERY_POSITIVE),
    (0.6, SentimentLabel.VERY_POSITIVE),
    (0.3, SentimentLabel.POSITIVE),
    (0.0, SentimentLabel.NEUTRAL),
    (-0.05, SentimentLabel.NEGATIVE),
    (-0.59, SentimentLabel.NEGATIVE),
    (-0.6, SentimentLabel.VERY_NEGATIVE),
])
def test_label_for_thresholds(engine, compound, expected):
    assert engine.label_for(compound) == expected


def test_invalid_thresholds():
    with pytest.raises(ValueError):
        VaderSentimentEngine(positive_threshold=0.7, very_positive_threshold=0.6)


def test_analyze_labels_each_sentence(engine):
    scores = iter([{"compound": 0.8}, {"compound": -0.4}])

    with patch.object(engine.analyser, "polarity_scores", side_effect=lambda s: next(scores)):
        sentences = engine.analyze("Lovely store. Parking was bad.")

    assert [s.text for s in sentences] == ["Lovely store.", "Parking was bad."]
    assert [s.label for s in sentences] == [
        SentimentLabel.VERY_POSITIVE,
        SentimentLabel.NEGATIVE,
    ]


def test_analyze_blank_text(engine):
    assert engine.analyze("") == []


def test_analyze_real_lexicon(engine):
    """Clearly worded comments land on the expected side of neutral."""
    positive = engine.analyze("The staff were wonderful and very helpful!")
    negative = engine.analyze("Terrible service, the worst experience ever.")

    assert positive[0].label.severity > SentimentLabel.NEUTRAL.severity
    assert negative[0].label.severity < SentimentLabel.NEUTRAL.severity


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
