"""
Duplicate Detection Agent - LangGraph node for similar complaint search.
"""

import logging
from typing import Dict, Any

from components.similarity.tools import find_duplicate_complaints

logger = logging.getLogger(__name__)


async def similarity_node(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    LangGraph node comparing the complaint against the supplied corpus.

    Uses the resolved category from the classification step, so complaints
    filed without a category are still compared on their predicted one.

    Args:
        state: Current workflow state containing complaint and corpus

    Returns:
        Partial state update with the similarity report
    """
    try:
        candidate = {
            **state.get("complaint", {}),
            "category": state.get("category") or state.get("complaint", {}).get("category"),
        }
        corpus = state.get("corpus") or []

        result = await find_duplicate_complaints.ainvoke({
            "candidate": candidate,
            "corpus": corpus,
        })

        logger.info(
            "Duplicate Detection Agent - %d similar out of %d",
            result["total_similar"],
            len(corpus),
        )

        return {
            "similar_complaints": result,
            "status": "success",
            "current_agent": "similarity",
            "messages": [{
                "role": "assistant",
                "content": result["recommendation"],
            }],
        }

    except Exception as e:
        logger.exception("Duplicate detection error")
        return {
            "status": "error",
            "current_agent": "similarity",
            "error_message": f"Duplicate detection failed: {str(e)}",
            "messages": [{
                "role": "assistant",
                "content": f"Duplicate detection failed: {str(e)}",
            }],
        }
