"""
Sentiment Component - keyword sentiment scoring for complaints.
"""

from components.sentiment.models import SentimentRequest, SentimentResult
from components.sentiment.service import (
    SentimentConfig,
    SentimentService,
    analyze_sentiment,
)
from components.sentiment.router import router
from components.sentiment.agent import sentiment_node
from components.sentiment.tools import analyze_complaint_sentiment

__all__ = [
    "analyze_sentiment",
    "sentiment_node",
    "analyze_complaint_sentiment",
    "SentimentRequest",
    "SentimentResult",
    "SentimentService",
    "SentimentConfig",
    "router",
]
