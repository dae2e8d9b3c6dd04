"""
Pipeline stages for FeedbackLens.

Contains the three stages a feedback file passes through:
- Record Parser
- Sentiment Classifier Adapter
- Report Writer
"""
