from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from tourika.api.models.schemas import GeneratedItinerary


@dataclass
class TravelPlanEntity:
    id: str
    destination: str
    start_date: str
    end_date: str
    budget: int
    travel_style: str
    itinerary: GeneratedItinerary
    created_at: datetime
    interests: List[str] = field(default_factory=list)
    user_id: Optional[str] = None

    def to_api_model(self):
        from tourika.api.models.schemas import TravelPlan as TravelPlanSchema

        return TravelPlanSchema(
            id=self.id,
            userId=self.user_id,
            destination=self.destination,
            startDate=self.start_date,
            endDate=self.end_date,
            budget=self.budget,
            travelStyle=self.travel_style,
            interests=self.interests,
            itinerary=self.itinerary,
            createdAt=self.created_at,
        )
