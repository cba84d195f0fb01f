"""
LangGraph Workflow - Orchestrates analysis components into a pipeline.

Implements the complaint analysis pipeline:
Classification -> Sentiment -> Response Suggestions -> Duplicate Detection -> Scoring

Each agent is a component from the components/ folder, composed here
using LangGraph's StateGraph for workflow orchestration.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from langgraph.graph import StateGraph, END

from components.complaints.models import Complaint
from components.orchestrator.models import ComprehensiveAnalysis
from components.orchestrator.scoring import build_recommendations, compute_ai_score
from components.orchestrator.state import ComplaintWorkflowState
from components.base.exceptions import ProcessingError
from components.classification.agent import classification_node
from components.classification.models import ClassificationResponse
from components.responses.agent import response_node
from components.responses.models import ResponseSuggestions
from components.sentiment.agent import sentiment_node
from components.sentiment.models import SentimentResult
from components.similarity.agent import similarity_node
from components.similarity.models import SimilarityReport

logger = logging.getLogger(__name__)

CLASSIFICATION_AGENT = "Classification Agent"
SENTIMENT_AGENT = "Sentiment Agent"
RESPONSE_AGENT = "Response Agent"
SIMILARITY_AGENT = "Duplicate Detection Agent"
SCORING_AGENT = "Scoring Agent"
ERROR_HANDLER = "Error Handler"


def _route_on_status(next_node: str):
    """Build a router that continues to next_node unless the last agent failed."""

    def route(state: ComplaintWorkflowState) -> str:
        if state.get("status") == "error":
            return "error_handler"
        return next_node

    return route


def scoring_node(state: ComplaintWorkflowState) -> Dict[str, Any]:
    """
    Combine agent outputs into the comprehensive analysis.

    Args:
        state: Workflow state with every agent output present

    Returns:
        State update with the analysis dict
    """
    try:
        sentiment = SentimentResult.model_validate(state["sentiment_analysis"])
        responses = ResponseSuggestions.model_validate(state["response_suggestions"])
        similar = SimilarityReport.model_validate(state["similar_complaints"])

        complaint_id = state.get("complaint", {}).get("id")
        analysis = ComprehensiveAnalysis(
            complaint_id=str(complaint_id) if complaint_id is not None else None,
            category=state["category"],
            priority=state["priority"],
            classification=ClassificationResponse.model_validate(state["classification"]),
            sentiment_analysis=sentiment,
            response_suggestions=responses,
            similar_complaints=similar,
            ai_score=compute_ai_score(sentiment.score, similar.total_similar),
            recommendations=build_recommendations(similar, sentiment, responses),
        )

        return {
            "analysis": analysis.model_dump(mode="json"),
            "status": "success",
            "current_agent": "scoring",
            "messages": [{
                "role": "assistant",
                "content": f"Overall score {analysis.ai_score.overall}",
            }],
        }

    except Exception as e:
        logger.exception("Scoring error")
        return {
            "status": "error",
            "current_agent": "scoring",
            "error_message": f"Scoring failed: {str(e)}",
            "messages": [{"role": "assistant", "content": f"Scoring failed: {str(e)}"}],
        }


def error_handler_node(state: ComplaintWorkflowState) -> Dict[str, Any]:
    """
    Mark the run as failed so the caller falls back to manual triage.

    Args:
        state: Current workflow state

    Returns:
        State update dict flagging the failure
    """
    error_message = state.get("error_message", "Unknown error")
    current_agent = state.get("current_agent", "unknown")

    logger.warning("Workflow failed at %s: %s", current_agent, error_message)

    return {
        "status": "failed",
        "error_message": f"Workflow failed at {current_agent}: {error_message}",
        "analysis": None,
        "messages": [{
            "role": "assistant",
            "content": f"Workflow failed at {current_agent}: {error_message}. Manual triage required.",
        }],
    }


def build_workflow():
    """
    Build the LangGraph workflow for complaint analysis.

    Creates a StateGraph with:
    - Five agent nodes (classification, sentiment, responses, similarity, scoring)
    - Error handler node for graceful degradation
    - Conditional routing based on agent status

    Returns:
        Compiled StateGraph ready for execution
    """
    workflow = StateGraph(ComplaintWorkflowState)

    workflow.add_node(CLASSIFICATION_AGENT, classification_node)
    workflow.add_node(SENTIMENT_AGENT, sentiment_node)
    workflow.add_node(RESPONSE_AGENT, response_node)
    workflow.add_node(SIMILARITY_AGENT, similarity_node)
    workflow.add_node(SCORING_AGENT, scoring_node)
    workflow.add_node(ERROR_HANDLER, error_handler_node)

    workflow.set_entry_point(CLASSIFICATION_AGENT)

    pipeline = [
        (CLASSIFICATION_AGENT, "sentiment", SENTIMENT_AGENT),
        (SENTIMENT_AGENT, "responses", RESPONSE_AGENT),
        (RESPONSE_AGENT, "similarity", SIMILARITY_AGENT),
        (SIMILARITY_AGENT, "scoring", SCORING_AGENT),
        (SCORING_AGENT, "end", END),
    ]
    for node, route_key, next_node in pipeline:
        workflow.add_conditional_edges(
            node,
            _route_on_status(route_key),
            {
                route_key: next_node,
                "error_handler": ERROR_HANDLER,
            },
        )

    workflow.add_edge(ERROR_HANDLER, END)

    return workflow.compile()


# Singleton workflow instance
_workflow = None


def get_workflow():
    """
    Get the compiled workflow instance (singleton).

    Returns:
        Compiled LangGraph workflow
    """
    global _workflow
    if _workflow is None:
        _workflow = build_workflow()
    return _workflow


def prepare_initial_state(complaint, corpus: Iterable = ()) -> ComplaintWorkflowState:
    """Initial workflow state for a complaint model or dict."""
    if isinstance(complaint, Complaint):
        complaint = complaint.model_dump(mode="json", exclude_unset=True)
    corpus = [
        entry.model_dump(mode="json") if isinstance(entry, Complaint) else dict(entry)
        for entry in corpus
    ]
    return {
        "complaint": dict(complaint),
        "corpus": corpus,
        "status": "processing",
        "error_message": None,
        "current_agent": "start",
        "messages": [],
    }


async def run_analysis(complaint, corpus: Iterable = (), workflow=None) -> ComprehensiveAnalysis:
    """
    Analyze a complaint through the LangGraph workflow.

    Raises:
        ProcessingError: If any agent failed
    """
    workflow = workflow or get_workflow()
    final_state = await workflow.ainvoke(prepare_initial_state(complaint, corpus))

    analysis: Optional[Dict[str, Any]] = final_state.get("analysis")
    if final_state.get("status") != "success" or analysis is None:
        raise ProcessingError(
            final_state.get("error_message") or "Complaint analysis failed",
            component="orchestrator",
            stage=final_state.get("current_agent"),
        )

    return ComprehensiveAnalysis.model_validate(analysis)
