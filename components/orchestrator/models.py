"""
Pydantic models for the comprehensive complaint analysis.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from components.classification.models import ClassificationResponse
from components.complaints.models import Complaint
from components.responses.models import ResponseSuggestions
from components.sentiment.models import SentimentResult
from components.similarity.models import SimilarityReport


class AIScore(BaseModel):
    """Composite quality score for a complaint."""

    overall: int = Field(ge=0, le=100)
    sentiment: int = Field(ge=0, le=100)
    uniqueness: int = Field(ge=0, le=100)
    quality: int = Field(ge=0, le=100)


class ComprehensiveAnalysis(BaseModel):
    """Everything the engine knows about one complaint."""

    complaint_id: Optional[str] = None
    category: str
    priority: str
    classification: ClassificationResponse
    sentiment_analysis: SentimentResult
    response_suggestions: ResponseSuggestions
    similar_complaints: SimilarityReport
    ai_score: AIScore
    recommendations: List[str] = Field(default_factory=list)


class AnalysisRequest(BaseModel):
    """Request model for the comprehensive analysis endpoint."""

    complaint: Complaint = Field(description="Complaint to analyze")
    corpus: List[Complaint] = Field(
        default_factory=list, description="Existing complaints for duplicate detection"
    )
