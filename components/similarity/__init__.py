"""
Similarity Component - duplicate complaint detection.

Usage:
    from components.similarity import find_similar_complaints
    report = find_similar_complaints(new_complaint, existing_complaints)
    if report.has_duplicates:
        ...
"""

from components.similarity.models import (
    SimilarityMatch,
    SimilarityReport,
    SimilarityRequest,
    TextSimilarityRequest,
    TextSimilarityResponse,
)
from components.similarity.service import (
    DUPLICATE_THRESHOLD,
    SIMILARITY_THRESHOLD,
    SimilarityConfig,
    SimilarityService,
    calculate_text_similarity,
    find_similar_complaints,
    tokenize,
)
from components.similarity.router import router
from components.similarity.agent import similarity_node
from components.similarity.tools import find_duplicate_complaints

__all__ = [
    "calculate_text_similarity",
    "find_similar_complaints",
    "tokenize",
    "DUPLICATE_THRESHOLD",
    "SIMILARITY_THRESHOLD",
    "similarity_node",
    "find_duplicate_complaints",
    "SimilarityMatch",
    "SimilarityReport",
    "SimilarityRequest",
    "TextSimilarityRequest",
    "TextSimilarityResponse",
    "SimilarityService",
    "SimilarityConfig",
    "router",
]
