"""
Classification Agent - LangGraph node for complaint classification.

Designed to be used as a node in the complaint analysis workflow.
"""

import logging
from typing import Dict, Any

from components.classification.tools import classify_complaint_text

logger = logging.getLogger(__name__)


async def classification_node(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    LangGraph node for complaint classification.

    Classifies the complaint description and fills in category and priority
    when the complaint did not come with them.

    Args:
        state: Current workflow state containing the complaint

    Returns:
        Partial state update with classification results
    """
    try:
        complaint = state.get("complaint", {})
        description = complaint.get("description", "")

        logger.info("Classification Agent - analyzing complaint %s", complaint.get("id", "N/A"))

        result = await classify_complaint_text.ainvoke({"description": description})

        category = complaint.get("category") or result["category"]
        priority = complaint.get("priority") or result["priority"]

        return {
            "classification": result,
            "category": category,
            "priority": priority,
            "status": "success",
            "current_agent": "classification",
            "messages": [{
                "role": "assistant",
                "content": f"Classified complaint as {result['category']} "
                           f"({result['confidence']}% confidence), {result['priority']} priority",
            }],
        }

    except Exception as e:
        logger.exception("Classification error")
        return {
            "status": "error",
            "current_agent": "classification",
            "error_message": f"Classification failed: {str(e)}",
            "messages": [{
                "role": "assistant",
                "content": f"Classification failed: {str(e)}",
            }],
        }
