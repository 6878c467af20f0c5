from __future__ import annotations

from functools import lru_cache

from openai import AsyncOpenAI

from tourika.core.config import settings

PLACEHOLDER_API_KEY = "your-openai-key"


@lru_cache(maxsize=1)
def get_client() -> AsyncOpenAI:
    """Returns the shared AsyncOpenAI client; requests fail at call time if no key is configured."""
    return AsyncOpenAI(api_key=settings.openai_api_key or PLACEHOLDER_API_KEY)
