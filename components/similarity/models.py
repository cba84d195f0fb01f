"""
Pydantic models for the Similarity component.

Defines request/response contracts for duplicate complaint detection.
"""

from typing import List
from pydantic import BaseModel, Field

from components.complaints.models import Complaint


class SimilarityMatch(Complaint):
    """A corpus complaint annotated with its similarity to the candidate."""

    similarity: int = Field(ge=0, le=100, description="Similarity percentage, rounded")
    is_duplicate: bool = Field(description="True when similarity is above the duplicate threshold")


class SimilarityRequest(BaseModel):
    """Request model for duplicate detection."""

    candidate: Complaint = Field(description="Complaint to check")
    corpus: List[Complaint] = Field(
        default_factory=list, description="Existing complaints to compare against"
    )

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "candidate": {
                        "description": "wifi is not working in lab 3",
                        "category": "internet_connectivity",
                    },
                    "corpus": [
                        {
                            "id": 7,
                            "description": "wifi down in laboratory 3 again",
                            "category": "internet_connectivity",
                        }
                    ],
                }
            ]
        }


class TextSimilarityRequest(BaseModel):
    """Request model for comparing two raw texts."""

    text_a: str = Field(description="First text")
    text_b: str = Field(description="Second text")


class TextSimilarityResponse(BaseModel):
    similarity: float = Field(ge=0, le=100, description="Similarity percentage")


class SimilarityReport(BaseModel):
    """Response model for duplicate detection."""

    has_duplicates: bool = Field(description="Whether any match is a duplicate")
    total_similar: int = Field(description="Number of matches above the similarity threshold")
    similar: List[SimilarityMatch] = Field(
        default_factory=list, description="Top matches, most similar first"
    )
    duplicates: List[SimilarityMatch] = Field(
        default_factory=list, description="Every match flagged as duplicate"
    )
    recommendation: str = Field(description="Suggested triage action")
