"""
Configuration settings for FeedbackLens.

Centralized configuration for the parser, sentiment engines and report.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent

# Input / output
INPUT_PATH = os.getenv("FEEDBACK_INPUT", "store_feedback.txt")
OUTPUT_PATH = os.getenv("FEEDBACK_OUTPUT", "sentiment_feedback_output.txt")

# Sentiment engine: "gemini" or "vader"
SENTIMENT_ENGINE = os.getenv("SENTIMENT_ENGINE", "vader")

# API Configuration
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")

# LLM Model
SENTIMENT_MODEL = "gemini-1.5-flash"

# Temperature settings (0.0 for deterministic)
LLM_TEMPERATURE = 0.0

# VADER compound score thresholds
VADER_VERY_POSITIVE_THRESHOLD = 0.6
VADER_POSITIVE_THRESHOLD = 0.05
VADER_NEGATIVE_THRESHOLD = -0.05
VADER_VERY_NEGATIVE_THRESHOLD = -0.6

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "feedbacklens.log"
