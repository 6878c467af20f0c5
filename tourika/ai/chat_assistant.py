from __future__ import annotations

import logging
from typing import Any, Optional

from openai import AsyncOpenAI

from tourika.ai.openai_client import get_client
from tourika.ai.prompts import CHAT_SYSTEM_PROMPT, build_chat_prompt
from tourika.core.config import settings

logger = logging.getLogger(__name__)

EMPTY_REPLY = "I'm here to help with your travel planning!"
FALLBACK_REPLY = "I'm having trouble responding right now. Please try again in a moment."


async def get_chat_response(
    message: str, context: Optional[Any] = None, client: Optional[AsyncOpenAI] = None
) -> str:
    """
    Answer a free-text travel question. Model failures never raise: the user gets
    FALLBACK_REPLY instead, unlike itinerary generation which fails the request.
    """
    client = client or get_client()
    try:
        response = await client.chat.completions.create(
            model=settings.openai_model_chat,
            messages=[
                {"role": "system", "content": CHAT_SYSTEM_PROMPT},
                {"role": "user", "content": build_chat_prompt(message, context)},
            ],
            temperature=settings.chat_temperature,
            max_tokens=settings.chat_max_tokens,
        )
        return response.choices[0].message.content or EMPTY_REPLY
    except Exception as exc:
        logger.warning("OpenAI chat failed, returning fallback reply: %s", exc)
        return FALLBACK_REPLY
