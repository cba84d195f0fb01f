"""
Rule-based campus assistant.

Answers a handful of fixed intents and, for anything else, tries to read
the message as a complaint and offers to file it.
"""

import logging
import re
from typing import Any, Dict, Optional

from components.assistant.models import ChatReply, ChatRequest
from components.base import BaseComponent
from components.classification.service import ClassificationConfig, predict_category
from components.taxonomy import Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)

GREETING_WORDS = {"hello", "hi", "hey"}
REPORT_WORDS = ("report", "issue", "complaint")
STATUS_WORDS = ("status", "check")

REPLY_GREETING = (
    "Hello! I am the Campus AI Assistant. How can I help you today? "
    "You can report an issue or check status."
)
REPLY_REPORT = (
    "To report an issue, please go to the 'Report Issue' page. "
    "I can help you categorize it if you describe the problem."
)
REPLY_STATUS = (
    "You can check the status of your complaints in the Dashboard. "
    "Do you need help navigating there?"
)
REPLY_THANKS = "You're welcome! Let me know if you need anything else."
REPLY_FALLBACK = (
    "I'm not sure how to help with that. "
    "Please try asking about reporting an issue or checking status."
)

_WORDS = re.compile(r"[a-z']+")


class AssistantService(BaseComponent[ChatRequest, ChatReply]):
    """Keyword-driven chat replies for the campus help desk."""

    def __init__(
        self,
        config: Optional[ClassificationConfig] = None,
        taxonomy: Optional[Taxonomy] = None,
    ):
        self.config = config or ClassificationConfig()
        self.taxonomy = taxonomy or get_taxonomy(self.config.taxonomy)

    @property
    def component_name(self) -> str:
        return "assistant"

    def reply(self, message: str) -> ChatReply:
        lower_message = (message or "").lower()
        # Greetings match whole words so "this" is not read as "hi".
        words = set(_WORDS.findall(lower_message))

        if words & GREETING_WORDS:
            return ChatReply(response=REPLY_GREETING, intent="greeting")
        if any(word in lower_message for word in REPORT_WORDS):
            return ChatReply(response=REPLY_REPORT, intent="report")
        if any(word in lower_message for word in STATUS_WORDS):
            return ChatReply(response=REPLY_STATUS, intent="status")
        if "thank" in lower_message:
            return ChatReply(response=REPLY_THANKS, intent="thanks")

        prediction = predict_category(message, self.taxonomy)
        if prediction.confidence > self.config.suggestion_threshold:
            rule = self.taxonomy.get_category(prediction.category)
            label = rule.display_name if rule else prediction.category.replace("_", " ")
            return ChatReply(
                response=f"It sounds like you are talking about a {label} issue. "
                         "Would you like to report it?",
                intent="category",
                detected_category=prediction.category,
            )

        logger.debug("No intent matched for chat message")
        return ChatReply(response=REPLY_FALLBACK, intent="fallback")

    async def process(self, request: ChatRequest) -> ChatReply:
        return self.reply(request.message)

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy", "component": self.component_name}
