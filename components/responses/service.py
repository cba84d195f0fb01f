"""
Response Suggestion Service Component.

Picks canned reply templates for a complaint by category, and a tone
derived from its sentiment and priority.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from components.base import BaseComponent, ComponentConfig
from components.responses.models import ResponseRequest, ResponseSuggestions
from components.taxonomy import Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)

# Placeholder until suggestions come from a model that reports confidence.
RESPONSE_CONFIDENCE = 0.85

_KEY_SEPARATORS = re.compile(r"[\s\-]+")


def normalize_category(category: str) -> str:
    """Lower-case a category and join its words with underscores."""
    return _KEY_SEPARATORS.sub("_", (category or "").strip().lower())


def select_tone(sentiment: Optional[str], priority: Optional[str]) -> str:
    if sentiment == "urgent" or priority == "high":
        return "urgent"
    if sentiment == "negative":
        return "empathetic"
    return "professional"


def _has_segments(outer: List[str], inner: List[str]) -> bool:
    """True when inner appears as a contiguous run of outer's segments."""
    width = len(inner)
    return any(outer[i:i + width] == inner for i in range(len(outer) - width + 1))


def lookup_templates(category: str, taxonomy: Taxonomy) -> Tuple[str, ...]:
    """
    Templates for a category.

    Tries the exact key, then the first key sharing whole underscore
    segments with the category (e.g. 'water' -> 'water_supply'), then the
    default list.
    """
    templates = taxonomy.responses.templates
    key = normalize_category(category)

    if templates.get(key):
        return templates[key]

    if key:
        key_parts = key.split("_")
        for name, candidates in templates.items():
            name_parts = name.split("_")
            if candidates and (
                _has_segments(name_parts, key_parts) or _has_segments(key_parts, name_parts)
            ):
                return candidates

    return taxonomy.responses.default


def generate_response_suggestions(
    category: str,
    sentiment: Optional[str] = None,
    priority: Optional[str] = None,
    taxonomy: Optional[Taxonomy] = None,
) -> ResponseSuggestions:
    """
    Suggest replies for a complaint.

    Selection is deterministic: urgent tone takes the first two templates,
    empathetic takes the last then the first, professional takes all of
    them. Every suggestion ends with the tone's closing sentence.
    """
    taxonomy = taxonomy or get_taxonomy()
    templates = list(lookup_templates(category, taxonomy))
    tone = select_tone(sentiment, priority)

    if tone == "urgent":
        selected = templates[:2]
    elif tone == "empathetic":
        selected = [templates[-1]] + templates[:1] if templates else []
    else:
        selected = templates

    closing = taxonomy.responses.closings.get(tone)
    suggestions = [f"{text} {closing}" if closing else text for text in selected]

    return ResponseSuggestions(
        suggestions=suggestions,
        tone=tone,
        confidence=RESPONSE_CONFIDENCE,
        category=category,
        priority=priority,
    )


class ResponseConfig(ComponentConfig):
    """Configuration for Response Suggestion Service."""

    class Config:
        env_prefix = "RESPONSES_"


class ResponseService(BaseComponent[ResponseRequest, ResponseSuggestions]):
    """
    Service suggesting officer replies for a complaint.

    Usage:
        service = ResponseService()
        result = await service.process(
            ResponseRequest(category="sanitation", sentiment="negative", priority="medium")
        )
        print(result.tone)  # "empathetic"
    """

    def __init__(
        self,
        config: Optional[ResponseConfig] = None,
        taxonomy: Optional[Taxonomy] = None,
    ):
        self.config = config or ResponseConfig()
        self.taxonomy = taxonomy or get_taxonomy(self.config.taxonomy)

    @property
    def component_name(self) -> str:
        return "responses"

    def suggest(
        self, category: str, sentiment: Optional[str] = None, priority: Optional[str] = None
    ) -> ResponseSuggestions:
        return generate_response_suggestions(category, sentiment, priority, self.taxonomy)

    async def process(self, request: ResponseRequest) -> ResponseSuggestions:
        return self.suggest(request.category, request.sentiment, request.priority)

    async def health_check(self) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "component": self.component_name,
            "taxonomy": self.taxonomy.name,
            "template_categories": sorted(self.taxonomy.responses.templates),
        }
