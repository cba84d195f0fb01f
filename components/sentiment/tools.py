"""
Sentiment Tools - LangChain @tool decorated functions.
"""

from typing import Dict, Any

from langchain_core.tools import tool

from components.sentiment.service import SentimentService


@tool
async def analyze_complaint_sentiment(description: str) -> Dict[str, Any]:
    """
    Score the sentiment of a complaint description.

    Args:
        description: The complaint description

    Returns:
        Dict containing sentiment, score (0-100), keywords,
        emotional_intensity, has_negative_words and has_urgent_words
    """
    return SentimentService().analyze(description).model_dump()
