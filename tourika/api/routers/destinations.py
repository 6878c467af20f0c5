from typing import List, Optional

from fastapi import APIRouter, Depends

from tourika.api.models.schemas import Destination
from tourika.core.errors import NotFoundError
from tourika.dependencies import get_catalog_service
from tourika.domain.services.catalog_service import CatalogService

router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.get("", response_model=List[Destination])
async def list_destinations(search: Optional[str] = None, svc: CatalogService = Depends(get_catalog_service)):
    return await svc.list_destinations(search)


@router.get("/{destination_id}", response_model=Destination)
async def get_destination(destination_id: str, svc: CatalogService = Depends(get_catalog_service)):
    try:
        return await svc.get_destination(destination_id)
    except KeyError:
        raise NotFoundError("Destination not found")
