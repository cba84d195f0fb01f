"""
Response Tools - LangChain @tool decorated functions.
"""

from typing import Any, Dict, Optional

from langchain_core.tools import tool

from components.responses.service import ResponseService


@tool
async def suggest_complaint_responses(
    category: str,
    sentiment: str = "neutral",
    priority: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Suggest replies for a complaint.

    Args:
        category: Complaint category tag
        sentiment: positive, negative, urgent or neutral
        priority: low, medium or high

    Returns:
        Dict containing suggestions, tone, confidence, category and priority
    """
    return ResponseService().suggest(category, sentiment, priority).model_dump()
