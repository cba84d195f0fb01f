"""
Workflow State Schema - TypedDict for LangGraph workflow state.

Defines the shared state structure that flows through all agents
in the complaint analysis pipeline.
"""

from typing import TypedDict, List, Dict, Optional, Literal, Annotated
import operator


class ComplaintWorkflowState(TypedDict, total=False):
    """
    State schema for the LangGraph complaint analysis workflow.

    Uses TypedDict with total=False to allow partial state updates.
    Fields marked with Annotated use reducers for state accumulation.
    """

    # ========== Input Fields ==========
    complaint: Dict  # Complaint record (description, category, priority, ...)
    corpus: List[Dict]  # Existing complaints for duplicate detection

    # ========== Classification Output ==========
    classification: Optional[Dict]
    category: Optional[str]  # Complaint category, or the predicted one
    priority: Optional[str]  # Complaint priority, or the predicted one

    # ========== Analysis Output ==========
    sentiment_analysis: Optional[Dict]
    response_suggestions: Optional[Dict]
    similar_complaints: Optional[Dict]

    # ========== Final Output ==========
    analysis: Optional[Dict]  # ComprehensiveAnalysis as a dict

    # ========== Workflow Control ==========
    status: Literal["processing", "success", "error", "failed"]
    error_message: Optional[str]
    current_agent: str  # Name of current/last processing agent

    # ========== Accumulated Messages (uses reducer) ==========
    messages: Annotated[List[Dict], operator.add]
