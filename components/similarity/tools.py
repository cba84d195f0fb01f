"""
Similarity Tools - LangChain @tool decorated functions for duplicate detection.
"""

from typing import Any, Dict, List

from langchain_core.tools import tool

from components.similarity.service import SimilarityService


@tool
async def find_duplicate_complaints(
    candidate: Dict[str, Any],
    corpus: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Find complaints similar to a candidate complaint.

    Args:
        candidate: Complaint dict with at least description and category
        corpus: Existing complaint dicts to compare against

    Returns:
        Dict containing:
        - has_duplicates: Whether any match is above the duplicate threshold
        - total_similar: Number of matches above the similarity threshold
        - similar: Top matches with similarity and is_duplicate
        - duplicates: Every duplicate match
        - recommendation: Suggested triage action
    """
    return SimilarityService().find(candidate, corpus).model_dump(mode="json")
