"""
Gemini Sentiment Engine.

Splits a comment into sentences and labels each sentence with one of the
five sentiment categories using Gemini in JSON mode.
"""

import json
import logging
from typing import List
import google.generativeai as genai

from src.models.sentiment import SentenceSentiment, SentimentLabel

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are a customer service analytics assistant that rates the sentiment of customer feedback.

Your task:
1. Read the customer's comment
2. Split it into its individual sentences
3. Label the sentiment of each sentence on a five-point scale

Labels:
- "VERY_POSITIVE" = Enthusiastic praise
- "POSITIVE" = Satisfied or favorable
- "NEUTRAL" = Factual, mixed, or no clear sentiment
- "NEGATIVE" = Dissatisfied or critical
- "VERY_NEGATIVE" = Angry, hostile, or strongly critical

Rules:
- Keep sentence text exactly as written
- Label every sentence, in order
- If the comment has no sentences, return an empty array

Output valid JSON only."""


def _construct_user_prompt(text: str) -> str:
    """Construct user prompt from comment text."""
    return f"""Comment: "{text}"

Label each sentence as JSON:
{{
  "sentences": [
    {{
      "text": "...",
      "sentiment": "VERY_POSITIVE|POSITIVE|NEUTRAL|NEGATIVE|VERY_NEGATIVE"
    }}
  ]
}}"""


class GeminiSentimentEngine:
    """
    Sentence-level sentiment labeling backed by Gemini.

    Configured once and reused for every comment. Each call is a single
    attempt: a failed or unparseable response yields no sentences.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-1.5-flash",
        temperature: float = 0.0
    ):
        """
        Initialize Gemini sentiment engine.

        Args:
            api_key: Gemini API key
            model_name: Gemini model to use
            temperature: LLM temperature (0.0 for deterministic)

        Raises:
            ValueError: If no API key is given
        """
        if not api_key:
            raise ValueError(
                "GOOGLE_API_KEY environment variable not set. "
                "Set it or choose the vader engine."
            )

        self.model_name = model_name
        self.temperature = temperature

        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(
            model_name=model_name,
            generation_config={
                "temperature": temperature,
                "response_mime_type": "application/json"
            },
            system_instruction=SYSTEM_PROMPT
        )

        logger.info(f"Initialized GeminiSentimentEngine with model={model_name}, temp={temperature}")

    def analyze(self, text: str) -> List[SentenceSentiment]:
        """
        Label each sentence of the text.

        Args:
            text: Comment text

        Returns:
            Labeled sentences in order (empty for blank text or on failure)
        """
        if not text or len(text.strip()) == 0:
            return []

        try:
            response = self.model.generate_content(_construct_user_prompt(text))
            return self._parse_llm_response(response.text)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse LLM JSON response: {e}")
            return []
        except Exception as e:
            logger.error(f"LLM API error: {e}")
            return []

    def _parse_llm_response(self, response_text: str) -> List[SentenceSentiment]:
        """
        Parse LLM JSON response into SentenceSentiment objects.

        Raises:
            json.JSONDecodeError: If response is not valid JSON
        """
        data = json.loads(response_text)

        if not isinstance(data, dict) or "sentences" not in data:
            logger.warning("LLM response missing 'sentences' field")
            return []

        sentences = []
        for item in data["sentences"]:
            try:
                sentences.append(
                    SentenceSentiment(
                        text=item.get("text", ""),
                        label=SentimentLabel.parse(item["sentiment"])
                    )
                )
            except (KeyError, ValueError, AttributeError) as e:
                logger.warning(f"Invalid sentence in LLM response: {e}")
                continue

        return sentences
