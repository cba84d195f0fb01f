"""
Pydantic models for the campus assistant chat.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: str = Field(min_length=1, max_length=2000, description="User message")


class ChatReply(BaseModel):
    response: str = Field(description="Assistant reply")
    sender: str = Field(default="ai")
    intent: str = Field(description="greeting, report, status, thanks, category or fallback")
    detected_category: Optional[str] = Field(
        default=None, description="Category the message was classified as, if any"
    )
    timestamp: datetime = Field(default_factory=datetime.now)
