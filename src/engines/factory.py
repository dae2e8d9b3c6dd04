"""
Engine factory.

Builds the configured sentiment engine once for the whole run.
"""

import logging

import config.settings as settings

logger = logging.getLogger(__name__)


ENGINE_NAMES = ("gemini", "vader")


def build_engine(name: str = None, api_key: str = None):
    """
    Create a sentiment engine by name.

    Args:
        name: "gemini" or "vader" (defaults to settings.SENTIMENT_ENGINE)
        api_key: Google API key for the gemini engine
            (defaults to settings.GOOGLE_API_KEY)

    Returns:
        Engine exposing analyze(text) -> List[SentenceSentiment]

    Raises:
        ValueError: On an unknown engine name or a missing API key
    """
    name = (name or settings.SENTIMENT_ENGINE).lower()
    logger.info(f"Building sentiment engine: {name}")

    if name == "gemini":
        from src.engines.gemini import GeminiSentimentEngine

        return GeminiSentimentEngine(
            api_key=api_key if api_key is not None else settings.GOOGLE_API_KEY,
            model_name=settings.SENTIMENT_MODEL,
            temperature=settings.LLM_TEMPERATURE
        )

    if name == "vader":
        from src.engines.vader import VaderSentimentEngine

        return VaderSentimentEngine(
            very_positive_threshold=settings.VADER_VERY_POSITIVE_THRESHOLD,
            positive_threshold=settings.VADER_POSITIVE_THRESHOLD,
            negative_threshold=settings.VADER_NEGATIVE_THRESHOLD,
            very_negative_threshold=settings.VADER_VERY_NEGATIVE_THRESHOLD
        )

    raise ValueError(f"Unknown sentiment engine: {name}. Must be one of {', '.join(ENGINE_NAMES)}")
