"""
Unit tests for feedback and sentiment data models.
"""

import dataclasses

import pytest
from src.models.feedback import FeedbackRecord, FeedbackRecordBuilder
from src.models.sentiment import SentimentLabel


def test_record_defaults():
    """Optional fields default to empty strings, sentiment to None."""
    record = FeedbackRecord(id=1, comment="Nice")

    assert record.customer == ""
    assert record.department == ""
    assert record.date == ""
    assert record.sentiment is None


def test_record_validation():
    """Records need a positive id and a non-empty comment."""
    with pytest.raises(ValueError, match="id"):
        FeedbackRecord(id=0, comment="Nice")

    with pytest.raises(ValueError, match="comment"):
        FeedbackRecord(id=3, comment="")

    with pytest.raises(ValueError, match="id and comment"):
        FeedbackRecord(id=-1, comment="")


def test_record_is_immutable():
    """Records cannot be changed after construction."""
    record = FeedbackRecord(id=1, comment="Nice")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.comment = "Changed"


def test_with_sentiment_returns_new_record():
    """Attaching a sentiment leaves the original untouched."""
    record = FeedbackRecord(id=1, comment="Nice", department="Support")
    labeled = record.with_sentiment(SentimentLabel.POSITIVE)

    assert labeled.sentiment == SentimentLabel.POSITIVE
    assert labeled.department == "Support"
    assert record.sentiment is None


def test_builder_last_value_wins():
    """Later assignments overwrite earlier ones."""
    builder = FeedbackRecordBuilder()
    builder.id = 4
    builder.comment = "First"
    builder.comment = "Second"

    record = builder.build()
    assert record.id == 4
    assert record.comment == "Second"


def test_builder_rejects_missing_comment():
    builder = FeedbackRecordBuilder()
    builder.id = 2

    with pytest.raises(ValueError, match="comment"):
        builder.build()


def test_label_parse_spellings():
    """Engine spellings normalize to enum members."""
    assert SentimentLabel.parse("POSITIVE") == SentimentLabel.POSITIVE
    assert SentimentLabel.parse("Very negative") == SentimentLabel.VERY_NEGATIVE
    assert SentimentLabel.parse(" very_positive ") == SentimentLabel.VERY_POSITIVE
    assert SentimentLabel.parse("very-negative") == SentimentLabel.VERY_NEGATIVE


def test_label_parse_invalid():
    with pytest.raises(ValueError, match="Invalid sentiment label"):
        SentimentLabel.parse("ecstatic")

    with pytest.raises(ValueError):
        SentimentLabel.parse(None)


def test_label_severity_order():
    """Severity runs from VERY_NEGATIVE (0) to VERY_POSITIVE (4)."""
    ordered = sorted(SentimentLabel, key=lambda label: label.severity)

    assert ordered == [
        SentimentLabel.VERY_NEGATIVE,
        SentimentLabel.NEGATIVE,
        SentimentLabel.NEUTRAL,
        SentimentLabel.POSITIVE,
        SentimentLabel.VERY_POSITIVE,
    ]
    assert str(SentimentLabel.NEUTRAL) == "NEUTRAL"
