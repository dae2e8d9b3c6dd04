"""
Feedback record data model.

A single customer feedback entry parsed from the input file.
"""

from dataclasses import dataclass, replace
from typing import Optional

from src.models.sentiment import SentimentLabel


@dataclass(frozen=True)
class FeedbackRecord:
    """
    Parsed feedback entry. Immutable once constructed; the sentiment
    label is attached by creating a new record via with_sentiment().
    """
    id: int  # Positive, unique within a file
    comment: str  # Free text fed to the classifier
    customer: str = ""
    department: str = ""  # Grouping key, "" is its own group
    date: str = ""  # Stored verbatim
    sentiment: Optional[SentimentLabel] = None

    def __post_init__(self):
        missing = []
        if self.id is None or self.id <= 0:
            missing.append("id")
        if not self.comment:
            missing.append("comment")

        if missing:
            raise ValueError(f"Invalid entry - missing {' and '.join(missing)}")

    def with_sentiment(self, label: SentimentLabel) -> "FeedbackRecord":
        """Return a copy of this record carrying the given sentiment."""
        return replace(self, sentiment=label)


class FeedbackRecordBuilder:
    """
    Accumulates fields while a chunk is scanned line by line.
    Setting a field twice keeps the last value.
    """

    def __init__(self):
        self.id = 0
        self.customer = ""
        self.department = ""
        self.date = ""
        self.comment = ""

    def build(self) -> FeedbackRecord:
        """
        Freeze the accumulated fields into a FeedbackRecord.

        Raises:
            ValueError: If id or comment is missing
        """
        return FeedbackRecord(
            id=self.id,
            comment=self.comment,
            customer=self.customer,
            department=self.department,
            date=self.date
        )
