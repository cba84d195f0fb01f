"""
Sentiment Agent - LangGraph node for sentiment analysis.
"""

import logging
from typing import Dict, Any

from components.sentiment.tools import analyze_complaint_sentiment

logger = logging.getLogger(__name__)


async def sentiment_node(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    LangGraph node scoring the complaint's sentiment.

    Args:
        state: Current workflow state containing the complaint

    Returns:
        Partial state update with the sentiment analysis
    """
    try:
        description = state.get("complaint", {}).get("description", "")
        result = await analyze_complaint_sentiment.ainvoke({"description": description})

        logger.info("Sentiment Agent - %s (%s)", result["sentiment"], result["score"])

        return {
            "sentiment_analysis": result,
            "status": "success",
            "current_agent": "sentiment",
            "messages": [{
                "role": "assistant",
                "content": f"Sentiment is {result['sentiment']} with score {result['score']}",
            }],
        }

    except Exception as e:
        logger.exception("Sentiment error")
        return {
            "status": "error",
            "current_agent": "sentiment",
            "error_message": f"Sentiment analysis failed: {str(e)}",
            "messages": [{
                "role": "assistant",
                "content": f"Sentiment analysis failed: {str(e)}",
            }],
        }
