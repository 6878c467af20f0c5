from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from openai import AsyncOpenAI

from tourika.ai.itinerary_generator import generate_travel_plan
from tourika.api.models.schemas import CreateTravelPlanRequest, TravelPlanRequest
from tourika.domain.models import TravelPlanEntity
from tourika.domain.repositories import TravelRepository

logger = logging.getLogger(__name__)


class TravelPlanService:
    def __init__(self, repo: TravelRepository, client: Optional[AsyncOpenAI] = None):
        self.repo = repo
        self.client = client

    async def create_travel_plan(self, request: CreateTravelPlanRequest) -> TravelPlanEntity:
        itinerary = await generate_travel_plan(
            TravelPlanRequest.model_validate(request.model_dump(exclude={"userId"})),
            client=self.client,
        )
        entity = TravelPlanEntity(
            id=f"plan_{uuid4().hex[:12]}",
            destination=request.destination,
            start_date=request.startDate,
            end_date=request.endDate,
            budget=request.budget,
            travel_style=request.travelStyle,
            interests=list(request.interests),
            itinerary=itinerary,
            created_at=datetime.now(timezone.utc),
            user_id=request.userId,
        )
        await self.repo.save_travel_plan(entity)
        logger.info("Created travel plan %s for %s (%d days)", entity.id, entity.destination, len(itinerary.days))
        return entity

    async def list_travel_plans(self, user_id: Optional[str] = None) -> List[TravelPlanEntity]:
        return await self.repo.list_travel_plans(user_id)

    async def get_travel_plan(self, plan_id: str) -> TravelPlanEntity:
        return await self.repo.get_travel_plan(plan_id)
