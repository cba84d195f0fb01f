"""
Complaint analysis components.

Each component can be:
1. Imported directly as a Python module
2. Exposed as FastAPI endpoints
3. Wrapped as a LangChain tool and chained in the LangGraph workflow

Usage:
    from components.classification import ClassificationService, predict_category
    from components.sentiment import SentimentService, analyze_sentiment
    from components.similarity import SimilarityService, find_similar_complaints
    from components.responses import ResponseService, generate_response_suggestions
    from components.orchestrator import run_analysis
"""

from components.base import BaseComponent, ComponentConfig, ComponentError

__all__ = [
    "BaseComponent",
    "ComponentConfig",
    "ComponentError",
]
