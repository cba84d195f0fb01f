"""
Keyword Sentiment Analysis Service.

Scores complaint text as positive, negative, urgent or neutral from
keyword tallies against the taxonomy's sentiment lexicon.
"""

import logging
from typing import Any, Dict, List, Optional

from components.base import BaseComponent, ComponentConfig
from components.sentiment.models import SentimentRequest, SentimentResult
from components.taxonomy import Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)

URGENT_KEYWORD_PREFIX = "URGENT: "
NEUTRAL_SCORE = 50


def _hits(lower_text: str, keywords) -> List[str]:
    # Each keyword counts once however often it occurs.
    return [keyword for keyword in keywords if keyword in lower_text]


def analyze_sentiment(text: str, taxonomy: Optional[Taxonomy] = None) -> SentimentResult:
    """
    Analyze sentiment of a complaint description.

    Decision order: any urgent keyword makes the text urgent; otherwise the
    larger of the negative/positive tallies wins; a tie is neutral.

    Args:
        text: Complaint description (may be empty)
        taxonomy: Vocabulary to use. Defaults to the campus taxonomy.

    Returns:
        SentimentResult
    """
    if not text:
        return SentimentResult(sentiment="neutral", score=NEUTRAL_SCORE, keywords=[])

    lexicon = (taxonomy or get_taxonomy()).sentiment
    lower_text = text.lower()

    positive = _hits(lower_text, lexicon.positive)
    negative = _hits(lower_text, lexicon.negative)
    urgent = _hits(lower_text, lexicon.urgent)

    found = positive + negative + [f"{URGENT_KEYWORD_PREFIX}{word}" for word in urgent]
    keywords = list(dict.fromkeys(found))

    if urgent:
        sentiment = "urgent"
        score = min(100, 75 + 5 * len(urgent))
    elif len(negative) > len(positive):
        sentiment = "negative"
        score = max(0, NEUTRAL_SCORE - 10 * (len(negative) - len(positive)))
    elif len(positive) > len(negative):
        sentiment = "positive"
        score = min(100, NEUTRAL_SCORE + 10 * (len(positive) - len(negative)))
    else:
        sentiment = "neutral"
        score = NEUTRAL_SCORE

    return SentimentResult(
        sentiment=sentiment,
        score=score,
        keywords=keywords,
        emotional_intensity=max(len(positive), len(negative), len(urgent)),
        has_negative_words=bool(negative),
        has_urgent_words=bool(urgent),
    )


class SentimentConfig(ComponentConfig):
    """Configuration for Sentiment Service."""

    class Config:
        env_prefix = "SENTIMENT_"


class SentimentService(BaseComponent[SentimentRequest, SentimentResult]):
    """
    Keyword sentiment analysis service.

    Usage:
        service = SentimentService()
        result = await service.process(SentimentRequest(description="Thanks, great job"))
        print(result.sentiment)  # "positive"
    """

    def __init__(
        self,
        config: Optional[SentimentConfig] = None,
        taxonomy: Optional[Taxonomy] = None,
    ):
        self.config = config or SentimentConfig()
        self.taxonomy = taxonomy or get_taxonomy(self.config.taxonomy)

    @property
    def component_name(self) -> str:
        return "sentiment"

    def analyze(self, description: str) -> SentimentResult:
        return analyze_sentiment(description, self.taxonomy)

    async def process(self, request: SentimentRequest) -> SentimentResult:
        return self.analyze(request.description)

    async def health_check(self) -> Dict[str, Any]:
        lexicon = self.taxonomy.sentiment
        return {
            "status": "healthy",
            "component": self.component_name,
            "taxonomy": self.taxonomy.name,
            "lexicon_sizes": {
                "positive": len(lexicon.positive),
                "negative": len(lexicon.negative),
                "urgent": len(lexicon.urgent),
            },
        }
