"""
Similarity Service Component.

Detects similar and duplicate complaints with token-set Jaccard similarity
plus a bonus when one text contains the other.
"""

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from components.base import BaseComponent, ComponentConfig
from components.complaints.models import Complaint
from components.similarity.models import (
    SimilarityMatch,
    SimilarityReport,
    SimilarityRequest,
)

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3  # tokens of this length or shorter are ignored
SUBSTRING_BONUS = 20
SIMILARITY_THRESHOLD = 40
DUPLICATE_THRESHOLD = 75
MAX_SIMILAR_RESULTS = 5

RECOMMEND_MERGE = (
    "This appears to be a duplicate complaint. Consider merging with existing complaint."
)
RECOMMEND_REVIEW = "Similar complaints found. Review before processing."
RECOMMEND_NONE = "No similar complaints detected."

ComplaintLike = Union[Complaint, Dict[str, Any]]

_TAG_SEPARATORS = re.compile(r"[_\-]+")


def tokenize(text: str) -> Set[str]:
    """Lower-cased whitespace tokens longer than MIN_TOKEN_LENGTH."""
    return {word for word in (text or "").lower().split() if len(word) > MIN_TOKEN_LENGTH}


def calculate_text_similarity(text_a: str, text_b: str) -> float:
    """
    Similarity percentage (0-100) between two texts.

    Jaccard similarity of the token sets, plus SUBSTRING_BONUS when one full
    text contains the other. Symmetric in its arguments.
    """
    s1 = (text_a or "").lower().strip()
    s2 = (text_b or "").lower().strip()

    words1 = tokenize(s1)
    words2 = tokenize(s2)
    if not words1 or not words2:
        return 0.0

    similarity = len(words1 & words2) / len(words1 | words2) * 100

    if s1 in s2 or s2 in s1:
        similarity = min(100.0, similarity + SUBSTRING_BONUS)

    return similarity


def comparison_text(complaint: Complaint) -> str:
    """Description followed by the category tag split into words."""
    category = _TAG_SEPARATORS.sub(" ", complaint.category)
    return f"{complaint.description} {category}"


def _as_complaint(value: ComplaintLike) -> Complaint:
    if isinstance(value, Complaint):
        return value
    return Complaint.model_validate(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def recommend(matches: List[SimilarityMatch]) -> str:
    if any(match.is_duplicate for match in matches):
        return RECOMMEND_MERGE
    if matches:
        return RECOMMEND_REVIEW
    return RECOMMEND_NONE


def find_similar_complaints(
    candidate: ComplaintLike,
    corpus: Iterable[ComplaintLike],
    similarity_threshold: float = SIMILARITY_THRESHOLD,
    duplicate_threshold: float = DUPLICATE_THRESHOLD,
    max_results: int = MAX_SIMILAR_RESULTS,
) -> SimilarityReport:
    """
    Compare a candidate complaint against a corpus of existing complaints.

    Args:
        candidate: Complaint (or dict) being checked
        corpus: Existing complaints (or dicts)
        similarity_threshold: Keep matches strictly above this percentage
        duplicate_threshold: Flag matches strictly above this as duplicates
        max_results: Size of the `similar` list

    Returns:
        SimilarityReport with matches sorted most similar first
    """
    candidate = _as_complaint(candidate)
    candidate_text = comparison_text(candidate)

    scored = []
    for entry in corpus:
        entry = _as_complaint(entry)
        similarity = calculate_text_similarity(candidate_text, comparison_text(entry))
        if similarity > similarity_threshold:
            scored.append((similarity, entry))

    # Thresholds use the raw score; the reported value is rounded.
    scored.sort(key=lambda item: item[0], reverse=True)
    matches = [
        SimilarityMatch.model_validate({
            **entry.model_dump(),
            "similarity": _round_half_up(similarity),
            "is_duplicate": similarity > duplicate_threshold,
        })
        for similarity, entry in scored
    ]
    duplicates = [match for match in matches if match.is_duplicate]

    return SimilarityReport(
        has_duplicates=bool(duplicates),
        total_similar=len(matches),
        similar=matches[:max_results],
        duplicates=duplicates,
        recommendation=recommend(matches),
    )


class SimilarityConfig(ComponentConfig):
    """Configuration for Similarity Service."""

    similarity_threshold: float = SIMILARITY_THRESHOLD
    duplicate_threshold: float = DUPLICATE_THRESHOLD
    max_results: int = MAX_SIMILAR_RESULTS

    class Config:
        env_prefix = "SIMILARITY_"


class SimilarityService(BaseComponent[SimilarityRequest, SimilarityReport]):
    """
    Service for finding similar and duplicate complaints.

    Usage:
        service = SimilarityService()
        report = await service.process(
            SimilarityRequest(candidate=complaint, corpus=existing_complaints)
        )
        print(report.recommendation)
    """

    def __init__(self, config: Optional[SimilarityConfig] = None):
        self.config = config or SimilarityConfig()

    @property
    def component_name(self) -> str:
        return "similarity"

    def find(self, candidate: ComplaintLike, corpus: Iterable[ComplaintLike]) -> SimilarityReport:
        report = find_similar_complaints(
            candidate,
            corpus,
            similarity_threshold=self.config.similarity_threshold,
            duplicate_threshold=self.config.duplicate_threshold,
            max_results=self.config.max_results,
        )
        logger.debug(
            "Found %d similar complaints (%d duplicates)",
            report.total_similar,
            len(report.duplicates),
        )
        return report

    async def process(self, request: SimilarityRequest) -> SimilarityReport:
        return self.find(request.candidate, request.corpus)

    async def health_check(self) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "component": self.component_name,
            "similarity_threshold": self.config.similarity_threshold,
            "duplicate_threshold": self.config.duplicate_threshold,
            "max_results": self.config.max_results,
        }
