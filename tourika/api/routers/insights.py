from fastapi import APIRouter, Depends

from tourika.api.models.schemas import Insights
from tourika.dependencies import get_catalog_service
from tourika.domain.services.catalog_service import CatalogService

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/{destination}", response_model=Insights)
async def get_insights(destination: str, svc: CatalogService = Depends(get_catalog_service)):
    return svc.get_insights(destination)
