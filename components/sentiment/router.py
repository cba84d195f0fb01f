"""
Sentiment Analysis Router

Provides keyword-based sentiment scoring for complaint text.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from components.base.exceptions import ComponentError
from components.sentiment.models import SentimentRequest, SentimentResult
from components.sentiment.service import SentimentService

router = APIRouter(prefix="/sentiment", tags=["Sentiment Analysis"])
logger = logging.getLogger(__name__)

_service: Optional[SentimentService] = None


def get_service() -> SentimentService:
    """Dependency injection for sentiment service."""
    global _service
    if _service is None:
        _service = SentimentService()
    return _service


@router.post("/analyze", response_model=SentimentResult)
async def analyze_text(
    request: SentimentRequest,
    service: SentimentService = Depends(get_service),
):
    """
    Analyze sentiment of complaint text

    Returns:
    - sentiment: positive, negative, urgent or neutral
    - score: 0-100 (50 is neutral)
    - keywords: matched terms
    """
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict())
    except Exception as e:
        logger.exception(f"Sentiment analysis failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        )


@router.get("/health")
async def health_check(service: SentimentService = Depends(get_service)) -> Dict[str, Any]:
    """Check sentiment service health."""
    return await service.health_check()
