"""
Response Component - canned reply suggestions for complaints.
"""

from components.responses.models import ResponseRequest, ResponseSuggestions
from components.responses.service import (
    RESPONSE_CONFIDENCE,
    ResponseConfig,
    ResponseService,
    generate_response_suggestions,
    lookup_templates,
    select_tone,
)
from components.responses.router import router
from components.responses.agent import response_node
from components.responses.tools import suggest_complaint_responses

__all__ = [
    "generate_response_suggestions",
    "lookup_templates",
    "select_tone",
    "RESPONSE_CONFIDENCE",
    "response_node",
    "suggest_complaint_responses",
    "ResponseRequest",
    "ResponseSuggestions",
    "ResponseService",
    "ResponseConfig",
    "router",
]
