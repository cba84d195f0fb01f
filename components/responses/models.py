"""
Pydantic models for the Response Suggestion component.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Tone = Literal["urgent", "empathetic", "professional"]


class ResponseRequest(BaseModel):
    """Request model for response suggestions."""

    category: str = Field(min_length=1, description="Complaint category tag")
    sentiment: str = Field(default="neutral", description="Sentiment from the analyzer")
    priority: Optional[str] = Field(default=None, description="Complaint priority")

    class Config:
        json_schema_extra = {
            "examples": [
                {"category": "water_supply", "sentiment": "urgent", "priority": "high"},
                {"category": "sanitation", "sentiment": "negative", "priority": "medium"},
            ]
        }


class ResponseSuggestions(BaseModel):
    """Canned replies chosen for a complaint."""

    suggestions: List[str] = Field(description="Reply drafts, each ending with a tone closing")
    tone: Tone = Field(description="urgent, empathetic or professional")
    confidence: float = Field(description="Fixed placeholder confidence")
    category: str = Field(description="Category the templates were chosen for")
    priority: Optional[str] = Field(default=None, description="Priority passed in")
