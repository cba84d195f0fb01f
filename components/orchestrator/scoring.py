"""
Scoring and recommendations for the comprehensive analysis.

Also provides analyze_complaint_comprehensive(), the synchronous
composition of the four analysis components.
"""

import math
from typing import Iterable, List, Optional

from components.classification.service import ClassificationService
from components.complaints.models import Complaint
from components.orchestrator.models import AIScore, ComprehensiveAnalysis
from components.responses.models import ResponseSuggestions
from components.responses.service import generate_response_suggestions
from components.sentiment.models import SentimentResult
from components.sentiment.service import analyze_sentiment
from components.similarity.models import SimilarityReport
from components.similarity.service import find_similar_complaints
from components.taxonomy import Taxonomy, get_taxonomy

QUALITY_SCORE = 75
SIMILARITY_PENALTY = 5

SENTIMENT_WEIGHT = 0.3
UNIQUENESS_WEIGHT = 0.3
QUALITY_WEIGHT = 0.4

INTENSITY_THRESHOLD = 3


def compute_ai_score(sentiment_score: int, total_similar: int) -> AIScore:
    uniqueness = max(0, 100 - total_similar * SIMILARITY_PENALTY)
    overall = (
        sentiment_score * SENTIMENT_WEIGHT
        + uniqueness * UNIQUENESS_WEIGHT
        + QUALITY_SCORE * QUALITY_WEIGHT
    )
    return AIScore(
        overall=min(100, int(math.floor(overall + 0.5))),
        sentiment=sentiment_score,
        uniqueness=uniqueness,
        quality=QUALITY_SCORE,
    )


def build_recommendations(
    similar: SimilarityReport,
    sentiment: SentimentResult,
    responses: ResponseSuggestions,
) -> List[str]:
    recommendations = []
    if similar.has_duplicates:
        recommendations.append("Merge with similar complaint")
    if sentiment.has_urgent_words:
        recommendations.append("Flag as priority for faster response")
    if sentiment.emotional_intensity > INTENSITY_THRESHOLD:
        recommendations.append("Assign experienced officer")
    if responses.tone == "empathetic":
        recommendations.append("Include apology in response")
    return recommendations


def analyze_complaint_comprehensive(
    complaint,
    corpus: Iterable = (),
    taxonomy: Optional[Taxonomy] = None,
) -> ComprehensiveAnalysis:
    """
    Run every analysis component on one complaint.

    A complaint without a category or priority gets the predicted ones.

    Args:
        complaint: Complaint model or dict
        corpus: Existing complaints for duplicate detection
        taxonomy: Vocabulary to use. Defaults to the campus taxonomy.

    Returns:
        ComprehensiveAnalysis
    """
    taxonomy = taxonomy or get_taxonomy()
    raw = (
        complaint.model_dump(exclude_unset=True)
        if isinstance(complaint, Complaint)
        else dict(complaint)
    )

    classification = ClassificationService(taxonomy=taxonomy).classify(raw.get("description") or "")
    category = raw.get("category") or classification.category
    priority = raw.get("priority") or classification.priority

    sentiment = analyze_sentiment(raw.get("description") or "", taxonomy)
    responses = generate_response_suggestions(category, sentiment.sentiment, priority, taxonomy)
    similar = find_similar_complaints({**raw, "category": category}, corpus)

    complaint_id = raw.get("id")
    return ComprehensiveAnalysis(
        complaint_id=str(complaint_id) if complaint_id is not None else None,
        category=category,
        priority=priority,
        classification=classification,
        sentiment_analysis=sentiment,
        response_suggestions=responses,
        similar_complaints=similar,
        ai_score=compute_ai_score(sentiment.score, similar.total_similar),
        recommendations=build_recommendations(similar, sentiment, responses),
    )
