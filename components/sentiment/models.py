"""
Pydantic models for the Sentiment component.
"""

from typing import List, Literal
from pydantic import BaseModel, Field

Sentiment = Literal["positive", "negative", "urgent", "neutral"]


class SentimentRequest(BaseModel):
    """Input schema for sentiment analysis."""

    description: str = Field(
        min_length=1,
        max_length=5000,
        description="Complaint text to analyze",
    )


class SentimentResult(BaseModel):
    """Output schema for sentiment analysis."""

    sentiment: Sentiment = Field(description="positive, negative, urgent or neutral")
    score: int = Field(ge=0, le=100, description="Sentiment score (0-100, 50 is neutral)")
    keywords: List[str] = Field(
        default_factory=list,
        description="Matched terms, urgent ones prefixed with 'URGENT: '",
    )
    emotional_intensity: int = Field(
        default=0, ge=0, description="Largest of the positive/negative/urgent hit counts"
    )
    has_negative_words: bool = False
    has_urgent_words: bool = False
