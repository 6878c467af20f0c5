import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError as SchemaValidationError

from tourika.api.models.schemas import InsertReview, Review
from tourika.core.errors import InternalError, NotFoundError
from tourika.dependencies import get_catalog_service
from tourika.domain.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("", response_model=List[Review])
async def list_reviews(destination: Optional[str] = None, svc: CatalogService = Depends(get_catalog_service)):
    return await svc.list_reviews(destination)


@router.post("", response_model=Review)
async def create_review(payload: Dict[str, Any] = Body(...), svc: CatalogService = Depends(get_catalog_service)):
    try:
        body = InsertReview.model_validate(payload)
    except SchemaValidationError as exc:
        logger.warning("Rejected review body: %s", exc)
        raise InternalError("Failed to create review") from exc
    return await svc.create_review(body)


@router.get("/{review_id}", response_model=Review)
async def get_review(review_id: str, svc: CatalogService = Depends(get_catalog_service)):
    try:
        return await svc.get_review(review_id)
    except KeyError:
        raise NotFoundError("Review not found")
