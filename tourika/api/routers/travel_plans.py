import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError as SchemaValidationError

from tourika.api.models.schemas import CreateTravelPlanRequest, TravelPlan
from tourika.core.errors import InternalError, ItineraryGenerationError, NotFoundError
from tourika.dependencies import get_travel_plan_service
from tourika.domain.services.travel_plan_service import TravelPlanService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/travel-plans", tags=["travel-plans"])

CREATE_FAILED_MESSAGE = "Failed to create travel plan"


@router.post("", response_model=TravelPlan)
async def create_travel_plan(
    payload: Dict[str, Any] = Body(...), svc: TravelPlanService = Depends(get_travel_plan_service)
):
    try:
        body = CreateTravelPlanRequest.model_validate(payload)
    except SchemaValidationError as exc:
        logger.warning("Rejected travel plan body: %s", exc)
        raise InternalError(CREATE_FAILED_MESSAGE) from exc
    try:
        entity = await svc.create_travel_plan(body)
    except ItineraryGenerationError as exc:
        raise InternalError(CREATE_FAILED_MESSAGE) from exc
    return entity.to_api_model()


@router.get("", response_model=List[TravelPlan])
async def list_travel_plans(
    userId: Optional[str] = None, svc: TravelPlanService = Depends(get_travel_plan_service)
):
    return [entity.to_api_model() for entity in await svc.list_travel_plans(userId)]


@router.get("/{plan_id}", response_model=TravelPlan)
async def get_travel_plan(plan_id: str, svc: TravelPlanService = Depends(get_travel_plan_service)):
    try:
        entity = await svc.get_travel_plan(plan_id)
    except KeyError:
        raise NotFoundError("Travel plan not found")
    return entity.to_api_model()
