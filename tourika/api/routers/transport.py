from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from tourika.api.models.schemas import TransportOption
from tourika.core.errors import NotFoundError
from tourika.dependencies import get_catalog_service
from tourika.domain.services.catalog_service import CatalogService

router = APIRouter(prefix="/transport", tags=["transport"])


@router.get("", response_model=List[TransportOption])
async def list_transport_options(
    origin: Optional[str] = Query(default=None, alias="from"),
    to: Optional[str] = None,
    svc: CatalogService = Depends(get_catalog_service),
):
    return await svc.list_transport_options(origin, to)


@router.get("/{option_id}", response_model=TransportOption)
async def get_transport_option(option_id: str, svc: CatalogService = Depends(get_catalog_service)):
    try:
        return await svc.get_transport_option(option_id)
    except KeyError:
        raise NotFoundError("Transport option not found")
