"""
Report Writer.

Aggregates labeled feedback records into summary and per-department
statistics and renders the text report.
"""

import logging
import os
import stat
import tempfile
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple
import pandas as pd

from src.models.feedback import FeedbackRecord

logger = logging.getLogger(__name__)


REPORT_TITLE = "Sentiment Analysis Results"
RECORD_COLUMNS = ["id", "customer", "department", "date", "comment", "sentiment"]
PERCENT_QUANTUM = Decimal("0.1")
DEFAULT_FILE_MODE = 0o666


class ReportWriter:
    """
    Renders the sentiment report.

    Sections:
    1. Header
    2. Summary statistics (total + per-label count and percentage)
    3. Department analysis (same breakdown per department)
    4. Detailed entries in input order

    Labels and departments are listed in first-seen order.
    """

    def render(self, records: List[FeedbackRecord]) -> str:
        """
        Render the full report text.

        Args:
            records: Labeled records in input order

        Returns:
            Report text
        """
        df = self._to_frame(records)

        parts = [f"# {REPORT_TITLE}\n\n"]

        parts.append("## Summary Statistics\n\n")
        parts.append(f"Total Feedback Entries: {len(df)}\n")
        parts.append("Sentiment Distribution:\n")
        parts.extend(self._distribution_lines(df))

        parts.append("\n## Department Analysis\n\n")
        for department, group in self.department_groups(df):
            parts.append(f"### {department}\n\n")
            parts.extend(self._distribution_lines(group))
            parts.append("\n")

        parts.append("## Detailed Feedback Entries\n\n")
        for record in records:
            parts.append(self._render_entry(record))

        return "".join(parts)

    def write(self, records: List[FeedbackRecord], output_path: str) -> str:
        """
        Render the report and replace the output file with it.

        The report is written to a temporary file next to the destination
        and moved into place, so a failed write leaves no partial output.
        An existing report keeps its permissions; a new one follows the umask.

        Args:
            records: Labeled records in input order
            output_path: Destination file path

        Returns:
            The output path

        Raises:
            OSError: If the destination cannot be written
        """
        report = self.render(records)
        output_dir = os.path.dirname(os.path.abspath(output_path))

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=output_dir,
                prefix=".report-",
                suffix=".tmp",
                delete=False
            ) as f:
                tmp_path = f.name
                f.write(report)
            os.chmod(tmp_path, self._target_mode(output_path))
            os.replace(tmp_path, output_path)
        except OSError as e:
            logger.error(f"Failed to write report to {output_path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.info(f"Report written to {output_path} ({len(records)} entries)")
        return output_path

    def sentiment_counts(self, df: pd.DataFrame) -> List[Tuple[str, int, Decimal]]:
        """
        Count labels in first-seen order.

        Returns:
            (label, count, percentage of len(df)) tuples, percentages
            rounded half-up to one decimal place
        """
        if df.empty:
            return []

        total = len(df)
        counts = df.groupby("sentiment", sort=False).size()
        return [
            (label, int(count), self._percentage(int(count), total))
            for label, count in counts.items()
        ]

    def department_groups(self, df: pd.DataFrame):
        """Yield (department, group frame) pairs in first-seen order."""
        if df.empty:
            return
        for department, group in df.groupby("department", sort=False):
            yield department, group

    @staticmethod
    def _percentage(count: int, total: int) -> Decimal:
        """100 * count / total, rounded half-up to one decimal place."""
        return (Decimal(100 * count) / Decimal(total)).quantize(
            PERCENT_QUANTUM, rounding=ROUND_HALF_UP
        )

    @staticmethod
    def _target_mode(output_path: str) -> int:
        """Permissions of the existing report, or the umask default for a new one."""
        try:
            return stat.S_IMODE(os.stat(output_path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return DEFAULT_FILE_MODE & ~umask

    def _distribution_lines(self, df: pd.DataFrame) -> List[str]:
        return [
            f"- {label}: {count} ({percentage}%)\n"
            for label, count, percentage in self.sentiment_counts(df)
        ]

    def _render_entry(self, record: FeedbackRecord) -> str:
        sentiment = record.sentiment.value if record.sentiment else ""
        return (
            f"Feedback #{record.id}\n"
            f"Customer: {record.customer}\n"
            f"Department: {record.department}\n"
            f"Date: {record.date}\n"
            f"Comment: {record.comment}\n"
            f"Sentiment: {sentiment}\n\n"
        )

    def _to_frame(self, records: List[FeedbackRecord]) -> pd.DataFrame:
        """Build a DataFrame with one row per record, sentiment as plain text."""
        rows = [
            {
                "id": r.id,
                "customer": r.customer,
                "department": r.department,
                "date": r.date,
                "comment": r.comment,
                "sentiment": r.sentiment.value if r.sentiment else ""
            }
            for r in records
        ]
        return pd.DataFrame(rows, columns=RECORD_COLUMNS)
