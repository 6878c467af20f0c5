from __future__ import annotations

from typing import Optional

from openai import AsyncOpenAI

from tourika.ai.chat_assistant import get_chat_response
from tourika.api.models.schemas import ChatRequest, ChatResponse
from tourika.core.errors import ValidationError


class ChatService:
    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self.client = client

    async def handle_chat(self, chat_request: ChatRequest) -> ChatResponse:
        message = chat_request.message
        if not message:
            raise ValidationError("Message is required", {"field": "message", "reason": "Message must not be empty."})
        reply = await get_chat_response(message, chat_request.context, client=self.client)
        return ChatResponse(response=reply)
