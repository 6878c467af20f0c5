from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Tourika API"
    api_prefix: str = "/api"

    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("OPENAI_API_KEY", "OPENAI_API_KEY_ENV_VAR"),
        description="OpenAI API key; a placeholder is used when empty",
    )
    openai_model_itinerary: str = "gpt-4.1"
    openai_model_chat: str = "gpt-4.1-mini"
    itinerary_temperature: float = 0.7
    chat_temperature: float = 0.8
    chat_max_tokens: int = 300

    host: str = "0.0.0.0"
    port: int = 8000

    log_level: str = "INFO"
    seed_data: bool = True

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
