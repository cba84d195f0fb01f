"""
FastAPI router for Response Suggestion Service.
"""

import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Optional, Dict, Any

from components.base.exceptions import ComponentError
from components.responses.models import ResponseRequest, ResponseSuggestions
from components.responses.service import ResponseService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/responses",
    tags=["Response Suggestions"],
    responses={
        500: {"description": "Internal server error"},
        400: {"description": "Bad request"},
    },
)

_service: Optional[ResponseService] = None


def get_service() -> ResponseService:
    """Dependency injection for response service."""
    global _service
    if _service is None:
        _service = ResponseService()
    return _service


@router.post(
    "/suggest",
    response_model=ResponseSuggestions,
    summary="Suggest replies",
    description="Pick canned replies by category, with a tone from sentiment and priority.",
)
async def suggest_responses(
    request: ResponseRequest,
    service: ResponseService = Depends(get_service),
) -> ResponseSuggestions:
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.exception("Response suggestion failed")
        raise HTTPException(status_code=500, detail={"error": str(e)})


@router.get("/health", summary="Check response service health")
async def health_check(
    service: ResponseService = Depends(get_service),
) -> Dict[str, Any]:
    return await service.health_check()
