from fastapi import Depends, Request
from openai import AsyncOpenAI

from tourika.ai.openai_client import get_client
from tourika.domain.repositories import TravelRepository
from tourika.domain.services.catalog_service import CatalogService
from tourika.domain.services.chat_service import ChatService
from tourika.domain.services.travel_plan_service import TravelPlanService


def get_repository(request: Request) -> TravelRepository:
    # Owned by the app instance, see tourika.main.create_app.
    return request.app.state.repository


def get_llm_client() -> AsyncOpenAI:
    return get_client()


def get_catalog_service(
    repo: TravelRepository = Depends(get_repository),
) -> CatalogService:
    return CatalogService(repo=repo)


def get_travel_plan_service(
    repo: TravelRepository = Depends(get_repository),
    client: AsyncOpenAI = Depends(get_llm_client),
) -> TravelPlanService:
    return TravelPlanService(repo=repo, client=client)


def get_chat_service(
    client: AsyncOpenAI = Depends(get_llm_client),
) -> ChatService:
    return ChatService(client=client)


__all__ = [
    "get_repository",
    "get_llm_client",
    "get_catalog_service",
    "get_travel_plan_service",
    "get_chat_service",
]
