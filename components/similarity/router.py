"""
FastAPI router for Similarity Service.

Provides HTTP endpoints for duplicate complaint detection.
"""

import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Optional, Dict, Any

from components.base.exceptions import ComponentError
from components.similarity.models import (
    SimilarityReport,
    SimilarityRequest,
    TextSimilarityRequest,
    TextSimilarityResponse,
)
from components.similarity.service import SimilarityService, calculate_text_similarity

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/similarity",
    tags=["Duplicate Detection"],
    responses={
        500: {"description": "Internal server error"},
        400: {"description": "Bad request"},
    },
)

_service: Optional[SimilarityService] = None


def get_service() -> SimilarityService:
    """Dependency injection for similarity service."""
    global _service
    if _service is None:
        _service = SimilarityService()
    return _service


@router.post(
    "/find",
    response_model=SimilarityReport,
    summary="Find similar complaints",
    description="Compare a complaint against a corpus snapshot and flag duplicates.",
)
async def find_similar(
    request: SimilarityRequest,
    service: SimilarityService = Depends(get_service),
) -> SimilarityReport:
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.exception("Duplicate detection failed")
        raise HTTPException(status_code=500, detail={"error": str(e)})


@router.post(
    "/compare",
    response_model=TextSimilarityResponse,
    summary="Compare two texts",
)
async def compare_texts(request: TextSimilarityRequest) -> TextSimilarityResponse:
    return TextSimilarityResponse(
        similarity=calculate_text_similarity(request.text_a, request.text_b)
    )


@router.get("/health", summary="Check similarity service health")
async def health_check(
    service: SimilarityService = Depends(get_service),
) -> Dict[str, Any]:
    return await service.health_check()
