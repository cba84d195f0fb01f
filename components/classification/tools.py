"""
Classification Tools - LangChain @tool decorated functions.

These tools wrap the rule-based classifier so any LangChain agent or
LangGraph node can call it. The vocabulary comes from the taxonomy named
by the TAXONOMY setting.
"""

from typing import Dict, Any

from langchain_core.tools import tool

from components.classification.service import ClassificationService


@tool
async def classify_complaint_text(description: str) -> Dict[str, Any]:
    """
    Classify a complaint description into a category and priority.

    Args:
        description: The complaint description

    Returns:
        Dict containing:
        - category: Predicted category tag ('other' when nothing matches)
        - confidence: Heuristic confidence (0-100)
        - matched_keywords: Category keywords found in the text
        - priority: low, medium or high
        - priority_reason: Why that priority was chosen
        - summary: Short summary of the description
        - department: {name, code} of the suggested department
    """
    service = ClassificationService()
    return service.classify(description).model_dump()
