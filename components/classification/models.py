"""
Pydantic models for the Classification component.

Defines request/response contracts for category, priority and summary
prediction.
"""

from typing import List
from pydantic import BaseModel, Field

from components.complaints.models import Priority
from components.taxonomy.models import DepartmentAssignment


class ClassificationResult(BaseModel):
    """Keyword-overlap category prediction."""

    category: str = Field(description="Predicted category tag, or 'other'")
    confidence: int = Field(
        ge=0, le=100, description="Heuristic confidence, min(100, 30 + 15 * matches)"
    )
    matched_keywords: List[str] = Field(
        default_factory=list, description="Category keywords found in the text"
    )


class PriorityResult(BaseModel):
    """Priority ladder outcome."""

    priority: Priority = Field(description="low, medium or high")
    reason: str = Field(description="Why this priority was chosen")


class ClassificationRequest(BaseModel):
    """Request model for complaint classification."""

    description: str = Field(
        min_length=1,
        max_length=5000,
        description="Complaint description text",
    )

    class Config:
        json_schema_extra = {
            "examples": [
                {"description": "URGENT water leak flooding the basement"},
                {"description": "The projector in room 204 is not working again"},
            ]
        }


class ClassificationResponse(BaseModel):
    """Response model bundling every text-classifier output."""

    category: str = Field(description="Predicted category tag")
    confidence: int = Field(ge=0, le=100, description="Category confidence (0-100)")
    matched_keywords: List[str] = Field(description="Keywords that drove the category")
    priority: Priority = Field(description="Predicted priority")
    priority_reason: str = Field(description="Justification for the priority")
    summary: str = Field(description="Short summary of the description")
    department: DepartmentAssignment = Field(description="Suggested department")
