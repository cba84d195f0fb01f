"""
Assistant Component - rule-based help desk chat.
"""

from components.assistant.models import ChatReply, ChatRequest
from components.assistant.service import AssistantService
from components.assistant.router import router

__all__ = ["AssistantService", "ChatReply", "ChatRequest", "router"]
