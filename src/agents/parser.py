"""
Record Parser.

Splits raw feedback text into entries and extracts structured fields
from each entry.
"""

import logging
import re
from typing import List, Optional

from src.models.feedback import FeedbackRecord, FeedbackRecordBuilder

logger = logging.getLogger(__name__)


ENTRY_MARKER = "Feedback #"

# Lookahead keeps the marker with the chunk it introduces
ENTRY_SPLIT_PATTERN = re.compile(r"(?=Feedback #)")
ENTRY_ID_PATTERN = re.compile(r"Feedback #(\d+)")

# Line marker -> builder attribute
FIELD_MARKERS = (
    ("Customer:", "customer"),
    ("Department:", "department"),
    ("Date:", "date"),
    ("Comment:", "comment"),
)


class FeedbackParser:
    """
    Parses the flat-text feedback format into FeedbackRecord objects.

    Input format:
        Feedback #<N>
        Customer: <value>
        Department: <value>
        Date: <value>
        Comment: <value>

    Fields may appear in any order, any subset, and unrecognized lines
    (including an existing "Sentiment:" line) are ignored.
    """

    def parse_file(self, file_path: str, encoding: str = "utf-8") -> List[FeedbackRecord]:
        """
        Read and parse a feedback file.

        Args:
            file_path: Path to the feedback text file
            encoding: File encoding

        Returns:
            Valid records in file order

        Raises:
            OSError: If the file is missing or unreadable
            UnicodeDecodeError: If the file is not valid in the given encoding
        """
        try:
            with open(file_path, "r", encoding=encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read feedback file {file_path}: {e}")
            raise

        logger.info(f"Reading from: {file_path}")
        return self.parse(content)

    def parse(self, content: str) -> List[FeedbackRecord]:
        """
        Parse raw file content into records.

        Args:
            content: Entire file text

        Returns:
            Valid records in input order (invalid entries are logged and skipped)
        """
        chunks = self.split_entries(content)
        logger.info(f"Found {len(chunks)} potential feedback entries")

        records = []
        for position, chunk in enumerate(chunks):
            record = self.parse_entry(chunk, position)
            if record is not None:
                records.append(record)

        logger.info(f"Parsed {len(records)} valid feedback entries")
        return records

    def split_entries(self, content: str) -> List[str]:
        """
        Split content at every entry marker, dropping preamble and blanks.

        Returns:
            Trimmed chunks, each starting with the entry marker
        """
        chunks = []
        for raw_chunk in ENTRY_SPLIT_PATTERN.split(content):
            chunk = raw_chunk.strip()
            if not chunk or not chunk.startswith(ENTRY_MARKER):
                continue
            chunks.append(chunk)
        return chunks

    def parse_entry(self, chunk: str, position: int = 0) -> Optional[FeedbackRecord]:
        """
        Parse a single entry chunk.

        Args:
            chunk: Text of one entry, starting with the entry marker
            position: Index of the chunk, used in diagnostics

        Returns:
            FeedbackRecord, or None if id or comment is missing
        """
        builder = FeedbackRecordBuilder()

        for line in chunk.split("\n"):
            self._apply_line(builder, line.strip())

        try:
            return builder.build()
        except ValueError as e:
            logger.warning(
                f"Skipping entry at position {position}: {e} "
                f"(id={builder.id}, comment={builder.comment!r})"
            )
            return None

    def _apply_line(self, builder: FeedbackRecordBuilder, line: str) -> None:
        """Set the builder field named by the line's marker, if any."""
        if line.startswith(ENTRY_MARKER):
            match = ENTRY_ID_PATTERN.match(line)
            if match:
                builder.id = int(match.group(1))
            return

        for marker, attribute in FIELD_MARKERS:
            if line.startswith(marker):
                value = line[len(marker):].strip()
                # An empty value leaves the field unchanged
                if value:
                    setattr(builder, attribute, value)
                return
