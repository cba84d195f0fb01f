"""
FastAPI router for Classification Service.

Provides HTTP endpoints for complaint category/priority prediction.
Mount this router on your FastAPI app to expose classification APIs.
"""

import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Optional, Dict, Any

from components.classification.models import (
    ClassificationRequest,
    ClassificationResponse,
)
from components.classification.service import ClassificationService
from components.base.exceptions import ComponentError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/classification",
    tags=["Classification"],
    responses={
        500: {"description": "Internal server error"},
        400: {"description": "Bad request"},
    },
)

# Singleton service instance
_service: Optional[ClassificationService] = None


def get_service() -> ClassificationService:
    """Dependency injection for classification service."""
    global _service
    if _service is None:
        _service = ClassificationService()
    return _service


@router.post(
    "/analyze",
    response_model=ClassificationResponse,
    summary="Classify a complaint",
    description="Predict category, priority, summary and department for a complaint description.",
)
async def classify_complaint(
    request: ClassificationRequest,
    service: ClassificationService = Depends(get_service),
) -> ClassificationResponse:
    """
    Classify a complaint description.

    - category: keyword-overlap prediction with heuristic confidence
    - priority: urgent > safety > functional > routine ladder
    - summary: first sentence or truncated text
    """
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.exception("Classification failed")
        raise HTTPException(status_code=500, detail={"error": str(e)})


@router.get(
    "/health",
    summary="Check classification service health",
    description="Verify the classification service is operational.",
)
async def health_check(
    service: ClassificationService = Depends(get_service),
) -> Dict[str, Any]:
    """Check classification service health."""
    return await service.health_check()
