from __future__ import annotations

from typing import List, Optional

from tourika.api.models.schemas import (
    CrowdInsight,
    CurrencyInsight,
    Destination,
    Hotel,
    InsertReview,
    Insights,
    Review,
    TransportOption,
    WeatherInsight,
)
from tourika.domain.repositories import TravelRepository

# Insights are a fixed mock until a weather/currency provider is wired in.
_MOCK_INSIGHTS = Insights(
    weather=WeatherInsight(condition="Sunny", temperature="22°C", description="Perfect for outdoor activities"),
    crowdLevel=CrowdInsight(level="Medium", description="Book popular spots in advance"),
    currency=CurrencyInsight(rate="1 USD = 149 JPY", lastUpdated="Updated today"),
)


class CatalogService:
    """Read access to seeded catalog data plus review submission."""

    def __init__(self, repo: TravelRepository):
        self.repo = repo

    async def list_destinations(self, search: Optional[str] = None) -> List[Destination]:
        return await self.repo.list_destinations(search)

    async def get_destination(self, destination_id: str) -> Destination:
        return await self.repo.get_destination(destination_id)

    async def list_hotels(self, location: Optional[str] = None) -> List[Hotel]:
        return await self.repo.list_hotels(location)

    async def get_hotel(self, hotel_id: str) -> Hotel:
        return await self.repo.get_hotel(hotel_id)

    async def list_transport_options(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ) -> List[TransportOption]:
        return await self.repo.list_transport_options(origin, destination)

    async def get_transport_option(self, option_id: str) -> TransportOption:
        return await self.repo.get_transport_option(option_id)

    async def list_reviews(self, destination: Optional[str] = None) -> List[Review]:
        return await self.repo.list_reviews(destination)

    async def get_review(self, review_id: str) -> Review:
        return await self.repo.get_review(review_id)

    async def create_review(self, review: InsertReview) -> Review:
        return await self.repo.create_review(review)

    def get_insights(self, destination: str) -> Insights:
        return _MOCK_INSIGHTS.model_copy(deep=True)
