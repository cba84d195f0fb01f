import asyncio

import pytest

from components.assistant import AssistantService, ChatRequest
from components.assistant.service import (
    REPLY_FALLBACK,
    REPLY_GREETING,
    REPLY_REPORT,
    REPLY_STATUS,
    REPLY_THANKS,
)


class TestAssistantService:
    @pytest.fixture(scope="class")
    def assistant(self, campus):
        return AssistantService(taxonomy=campus)

    @pytest.mark.parametrize(
        "message, intent, response",
        [
            ("hi there", "greeting", REPLY_GREETING),
            ("Hello!", "greeting", REPLY_GREETING),
            ("I want to report something", "report", REPLY_REPORT),
            ("Where do I file a complaint", "report", REPLY_REPORT),
            ("Can I check the status", "status", REPLY_STATUS),
            ("thank you", "thanks", REPLY_THANKS),
            ("what is the weather", "fallback", REPLY_FALLBACK),
        ],
    )
    def test_intents(self, assistant, message, intent, response):
        reply = assistant.reply(message)
        assert reply.intent == intent
        assert reply.response == response
        assert reply.sender == "ai"

    def test_greeting_matches_whole_words(self, assistant):
        assert assistant.reply("this is broken").intent == "fallback"

    def test_detected_category(self, assistant):
        reply = assistant.reply("The wifi network keeps dropping")
        assert reply.intent == "category"
        assert reply.detected_category == "internet_connectivity"
        assert reply.response == (
            "It sounds like you are talking about a Internet Connectivity issue. "
            "Would you like to report it?"
        )

    def test_single_keyword_is_not_enough(self, assistant):
        reply = assistant.reply("my wifi")
        assert reply.intent == "fallback"
        assert reply.detected_category is None

    def test_process(self, assistant):
        reply = asyncio.run(assistant.process(ChatRequest(message="hey")))
        assert reply.intent == "greeting"
