"""
Classification Service Component.

Rule-based text classifier for complaints: keyword-overlap category
prediction, a priority ladder, a short summarizer and department routing.
Every function is pure given its text and the injected taxonomy.
"""

import logging
import re
from typing import Any, Dict, Optional

from components.base import BaseComponent, ComponentConfig
from components.classification.models import (
    ClassificationRequest,
    ClassificationResponse,
    ClassificationResult,
    PriorityResult,
)
from components.complaints.models import DEFAULT_CATEGORY
from components.taxonomy import DepartmentAssignment, Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)

SUMMARY_MIN_LENGTH = 50
SUMMARY_MAX_LENGTH = 100
SUMMARY_TRUNCATE_AT = 97

SENTENCE_SPLIT = re.compile(r"[.!?]")


def category_confidence(match_count: int) -> int:
    """Heuristic confidence for a keyword match count. Not a probability."""
    if match_count <= 0:
        return 0
    return min(100, 30 + 15 * match_count)


def predict_category(text: str, taxonomy: Optional[Taxonomy] = None) -> ClassificationResult:
    """
    Predict a complaint category by keyword overlap.

    Categories are scanned in taxonomy declaration order and the first
    category with the strictly highest number of matching keywords wins,
    so ties go to the category declared first.

    Args:
        text: Complaint description (may be empty)
        taxonomy: Vocabulary to use. Defaults to the campus taxonomy.

    Returns:
        ClassificationResult, 'other' with confidence 0 when nothing matches
    """
    if not text:
        return ClassificationResult(category=DEFAULT_CATEGORY, confidence=0, matched_keywords=[])

    taxonomy = taxonomy or get_taxonomy()
    lower_text = text.lower()

    best_category = DEFAULT_CATEGORY
    best_matches = []

    for category in taxonomy.categories:
        matches = [keyword for keyword in category.keywords if keyword in lower_text]
        if len(matches) > len(best_matches):
            best_category = category.name
            best_matches = matches

    return ClassificationResult(
        category=best_category,
        confidence=category_confidence(len(best_matches)),
        matched_keywords=best_matches,
    )


def predict_priority(text: str, taxonomy: Optional[Taxonomy] = None) -> PriorityResult:
    """
    Predict priority with a fixed ladder: urgent > safety > functional > routine.

    The first rung that fires decides; later rungs are never consulted.
    """
    taxonomy = taxonomy or get_taxonomy()
    lower_text = (text or "").lower()
    lexicon = taxonomy.priority

    if lower_text:
        for keyword in lexicon.urgent:
            if keyword in lower_text:
                return PriorityResult(
                    priority="high", reason=f'Contains urgent keyword: "{keyword}"'
                )

        if any(keyword in lower_text for keyword in lexicon.safety):
            return PriorityResult(priority="high", reason="Potential safety hazard reported")

        if any(keyword in lower_text for keyword in lexicon.functional):
            return PriorityResult(priority="medium", reason="Functional issue reported")

    return PriorityResult(priority="low", reason="Routine request")


def summarize_complaint(text: str) -> str:
    """
    Short summary of a complaint description.

    Short texts come back unchanged. Longer ones are reduced to their first
    sentence when that sentence has a reasonable length, otherwise they are
    truncated with an ellipsis.
    """
    if not text:
        return ""

    if len(text) < SUMMARY_MIN_LENGTH:
        return text

    first_sentence = SENTENCE_SPLIT.split(text, maxsplit=1)[0].strip()
    if 20 < len(first_sentence) < SUMMARY_MAX_LENGTH:
        return f"{first_sentence}."

    return text[:SUMMARY_TRUNCATE_AT] + "..."


def suggest_department(category: str, taxonomy: Optional[Taxonomy] = None) -> DepartmentAssignment:
    """Department responsible for a category, or the taxonomy default."""
    taxonomy = taxonomy or get_taxonomy()
    rule = taxonomy.get_category(category)
    if rule is not None and rule.department is not None:
        return rule.department
    return taxonomy.default_department


class ClassificationConfig(ComponentConfig):
    """Configuration for Classification Service."""

    # Minimum confidence for the assistant to suggest a detected category
    suggestion_threshold: int = 50

    class Config:
        env_prefix = "CLASSIFICATION_"


class ClassificationService(
    BaseComponent[ClassificationRequest, ClassificationResponse]
):
    """
    Service bundling category, priority, summary and department predictions.

    Usage:
        service = ClassificationService()
        response = await service.process(
            ClassificationRequest(description="URGENT water leak flooding the basement")
        )
        print(response.category)  # "water_supply"
    """

    def __init__(
        self,
        config: Optional[ClassificationConfig] = None,
        taxonomy: Optional[Taxonomy] = None,
    ):
        """
        Initialize the classification service.

        Args:
            config: Optional configuration. Uses defaults if not provided.
            taxonomy: Optional vocabulary. Loaded from config.taxonomy if not provided.
        """
        self.config = config or ClassificationConfig()
        self.taxonomy = taxonomy or get_taxonomy(self.config.taxonomy)

    @property
    def component_name(self) -> str:
        return "classification"

    def classify(self, description: str) -> ClassificationResponse:
        """Synchronous core used by process() and the LangChain tool."""
        classification = predict_category(description, self.taxonomy)
        priority = predict_priority(description, self.taxonomy)

        logger.debug(
            "Classified as %s (%d) with %s priority",
            classification.category,
            classification.confidence,
            priority.priority,
        )

        return ClassificationResponse(
            category=classification.category,
            confidence=classification.confidence,
            matched_keywords=classification.matched_keywords,
            priority=priority.priority,
            priority_reason=priority.reason,
            summary=summarize_complaint(description),
            department=suggest_department(classification.category, self.taxonomy),
        )

    async def process(self, request: ClassificationRequest) -> ClassificationResponse:
        """
        Classify a complaint description.

        Args:
            request: ClassificationRequest with the description

        Returns:
            ClassificationResponse with category, priority, summary and department
        """
        return self.classify(request.description)

    async def health_check(self) -> Dict[str, Any]:
        """Check if classification service is healthy."""
        return {
            "status": "healthy",
            "component": self.component_name,
            "taxonomy": self.taxonomy.name,
            "categories": list(self.taxonomy.category_names),
        }
