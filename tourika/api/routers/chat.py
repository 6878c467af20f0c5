from typing import Optional

from fastapi import APIRouter, Depends

from tourika.api.models.schemas import ChatRequest, ChatResponse
from tourika.dependencies import get_chat_service
from tourika.domain.services.chat_service import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(body: Optional[ChatRequest] = None, chat_svc: ChatService = Depends(get_chat_service)):
    return await chat_svc.handle_chat(body or ChatRequest())
