"""
Pipeline Orchestrator.

Runs the feedback pipeline: parse → classify → write report.
"""

import logging
from dataclasses import dataclass

from src.agents.parser import FeedbackParser
from src.agents.classifier import SentimentClassifier
from src.agents.report import ReportWriter

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of a successful run."""
    records_processed: int
    output_path: str


class FeedbackPipeline:
    """
    Orchestrates a single batch run.

    Coordinates:
    1. Parsing → 2. Sentiment Classification → 3. Report Writing

    The sentiment engine is built by the caller and shared by every
    classification in the run.
    """

    def __init__(self, engine, input_path: str, output_path: str):
        """
        Initialize pipeline.

        Args:
            engine: Sentiment engine exposing analyze(text)
            input_path: Feedback text file to read
            output_path: Report file to (over)write
        """
        self.input_path = input_path
        self.output_path = output_path

        logger.info("Initializing pipeline components...")

        self.parser = FeedbackParser()
        self.classifier = SentimentClassifier(engine)
        self.report_writer = ReportWriter()

        logger.info("Pipeline initialized successfully")

    def run(self) -> PipelineResult:
        """
        Run the pipeline end to end.

        Returns:
            PipelineResult with the processed count and report path

        Raises:
            OSError: If the input cannot be read or the report cannot be written
        """
        logger.info(f"Starting sentiment analysis of {self.input_path}")

        # STAGE 1: Parsing
        records = self.parser.parse_file(self.input_path)

        # STAGE 2: Classification
        labeled = self.classifier.classify_records(records)
        logger.info(f"Processed {len(labeled)} feedback entries")

        if labeled:
            first = labeled[0]
            logger.debug(
                f"First entry processed: id={first.id}, customer={first.customer!r}, "
                f"comment={first.comment!r}, sentiment={first.sentiment.value}"
            )
        else:
            logger.warning(f"No valid feedback entries found in {self.input_path}")

        # STAGE 3: Report
        output_path = self.report_writer.write(labeled, self.output_path)

        return PipelineResult(records_processed=len(labeled), output_path=output_path)
