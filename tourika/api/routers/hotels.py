from typing import List, Optional

from fastapi import APIRouter, Depends

from tourika.api.models.schemas import Hotel
from tourika.core.errors import NotFoundError
from tourika.dependencies import get_catalog_service
from tourika.domain.services.catalog_service import CatalogService

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=List[Hotel])
async def list_hotels(location: Optional[str] = None, svc: CatalogService = Depends(get_catalog_service)):
    return await svc.list_hotels(location)


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: str, svc: CatalogService = Depends(get_catalog_service)):
    try:
        return await svc.get_hotel(hotel_id)
    except KeyError:
        raise NotFoundError("Hotel not found")
