"""
FastAPI router for the campus assistant chat.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from components.assistant.models import ChatReply, ChatRequest
from components.assistant.service import AssistantService

router = APIRouter(prefix="/assistant", tags=["Assistant"])

_service: Optional[AssistantService] = None


def get_service() -> AssistantService:
    global _service
    if _service is None:
        _service = AssistantService()
    return _service


@router.post("/chat", response_model=ChatReply, summary="Chat with the campus assistant")
async def chat(request: ChatRequest, service: AssistantService = Depends(get_service)) -> ChatReply:
    return await service.process(request)


@router.get("/health")
async def health_check(service: AssistantService = Depends(get_service)) -> Dict[str, Any]:
    return await service.health_check()
