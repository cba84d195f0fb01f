"""
Response Agent - LangGraph node for reply suggestions.
"""

import logging
from typing import Dict, Any

from components.responses.tools import suggest_complaint_responses

logger = logging.getLogger(__name__)


async def response_node(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    LangGraph node suggesting replies from category, sentiment and priority.

    Args:
        state: Workflow state after classification and sentiment

    Returns:
        Partial state update with response suggestions
    """
    try:
        sentiment = (state.get("sentiment_analysis") or {}).get("sentiment", "neutral")

        result = await suggest_complaint_responses.ainvoke({
            "category": state.get("category") or "other",
            "sentiment": sentiment,
            "priority": state.get("priority"),
        })

        logger.info("Response Agent - %d suggestions, %s tone", len(result["suggestions"]), result["tone"])

        return {
            "response_suggestions": result,
            "status": "success",
            "current_agent": "responses",
            "messages": [{
                "role": "assistant",
                "content": f"Suggested {len(result['suggestions'])} {result['tone']} replies",
            }],
        }

    except Exception as e:
        logger.exception("Response suggestion error")
        return {
            "status": "error",
            "current_agent": "responses",
            "error_message": f"Response suggestion failed: {str(e)}",
            "messages": [{
                "role": "assistant",
                "content": f"Response suggestion failed: {str(e)}",
            }],
        }
