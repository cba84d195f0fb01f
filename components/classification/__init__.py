"""
Classification Component - rule-based complaint classifier.

Predicts category, priority, summary and department from complaint text.

Usage:
    # Pure functions
    from components.classification import predict_category, predict_priority
    result = predict_category("Wifi is down in the library", taxonomy)

    # As LangGraph node
    from components.classification import classification_node
    workflow.add_node("Classification Agent", classification_node)

    # As service
    from components.classification import ClassificationService, ClassificationRequest
    response = await ClassificationService().process(ClassificationRequest(...))
"""

from components.classification.models import (
    ClassificationRequest,
    ClassificationResponse,
    ClassificationResult,
    PriorityResult,
)
from components.classification.service import (
    ClassificationConfig,
    ClassificationService,
    category_confidence,
    predict_category,
    predict_priority,
    suggest_department,
    summarize_complaint,
)
from components.classification.router import router
from components.classification.agent import classification_node
from components.classification.tools import classify_complaint_text

__all__ = [
    # Pure functions
    "predict_category",
    "predict_priority",
    "summarize_complaint",
    "suggest_department",
    "category_confidence",
    # LangGraph node
    "classification_node",
    # LangChain tools
    "classify_complaint_text",
    # Models
    "ClassificationRequest",
    "ClassificationResponse",
    "ClassificationResult",
    "PriorityResult",
    # Service
    "ClassificationService",
    "ClassificationConfig",
    # Router
    "router",
]
