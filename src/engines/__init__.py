"""
Sentiment engines for FeedbackLens.

Each engine splits text into sentences and labels each one:
- Gemini: LLM-based sentence labeling (google-generativeai)
- VADER: offline lexicon scoring (vaderSentiment)
"""
