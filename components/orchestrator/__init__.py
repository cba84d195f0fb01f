"""
Orchestrator Module - LangGraph workflow for complaint analysis.

Composes the classification, sentiment, response and similarity
components into the comprehensive analysis of a complaint.
"""

from components.orchestrator.models import AIScore, AnalysisRequest, ComprehensiveAnalysis
from components.orchestrator.scoring import (
    analyze_complaint_comprehensive,
    build_recommendations,
    compute_ai_score,
)
from components.orchestrator.state import ComplaintWorkflowState
from components.orchestrator.workflow import (
    build_workflow,
    get_workflow,
    prepare_initial_state,
    run_analysis,
)

__all__ = [
    "AIScore",
    "AnalysisRequest",
    "ComprehensiveAnalysis",
    "ComplaintWorkflowState",
    "analyze_complaint_comprehensive",
    "build_recommendations",
    "compute_ai_score",
    "build_workflow",
    "get_workflow",
    "prepare_initial_state",
    "run_analysis",
]
