"""
FeedbackLens - Customer Feedback Sentiment Report

CLI entry point for running the sentiment pipeline.
"""

import argparse
import logging
import sys

from src.engines.factory import ENGINE_NAMES, build_engine
from src.orchestrator import FeedbackPipeline
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="FeedbackLens - Customer Feedback Sentiment Report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the default feedback file with the offline engine
  python main.py

  # Custom input and output paths
  python main.py --input store_feedback.txt \\
                 --output sentiment_feedback_output.txt

  # Use Gemini for sentence labeling
  python main.py --engine gemini

Note: Set GOOGLE_API_KEY environment variable before using the gemini engine.
        """
    )

    parser.add_argument(
        "--input",
        default=settings.INPUT_PATH,
        help=f"Feedback text file (default: {settings.INPUT_PATH})"
    )

    parser.add_argument(
        "--output",
        default=settings.OUTPUT_PATH,
        help=f"Report file to write (default: {settings.OUTPUT_PATH})"
    )

    parser.add_argument(
        "--engine",
        default=settings.SENTIMENT_ENGINE,
        choices=list(ENGINE_NAMES),
        help=f"Sentiment engine (default: {settings.SENTIMENT_ENGINE})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=" * 60)
    print("FeedbackLens - Customer Feedback Sentiment Report")
    print("=" * 60)
    print(f"Input: {args.input}")
    print(f"Output: {args.output}")
    print(f"Engine: {args.engine}")
    print("=" * 60)
    print()

    try:
        logger.info("Initializing sentiment engine...")
        engine = build_engine(args.engine)

        pipeline = FeedbackPipeline(
            engine=engine,
            input_path=args.input,
            output_path=args.output
        )
        result = pipeline.run()

        print()
        print("=" * 60)
        print("✅ Sentiment analysis completed successfully!")
        print("=" * 60)
        print(f"Processed entries: {result.records_processed}")
        print(f"Results written to: {result.output_path}")
        print("=" * 60)

        logger.info("FeedbackLens completed successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        print("\n⚠️  Pipeline interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        print(f"\n❌ Error processing feedback: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
