from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from tourika.domain.formatting import format_rating

# ---------- Itinerary (AI payload) ----------


class ItineraryDay(BaseModel):
    day: int = Field(ge=1)
    title: str
    description: str
    activities: List[str]
    estimatedCost: int = Field(ge=0)
    category: str


class Recommendations(BaseModel):
    weather: str
    crowdLevel: str
    bestTimeToVisit: str
    currency: str


class GeneratedItinerary(BaseModel):
    days: List[ItineraryDay] = Field(min_length=1)
    totalEstimatedCost: int = Field(ge=0)
    budgetUsed: float = Field(ge=0, le=100)
    recommendations: Recommendations


# ---------- Destination ----------


class InsertDestination(BaseModel):
    name: str
    country: str
    description: str
    imageUrl: str
    price: int
    rating: int = Field(ge=0, le=50)
    currency: str = "USD"


class Destination(InsertDestination):
    id: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def displayRating(self) -> str:
        return format_rating(self.rating)


# ---------- Hotel ----------


class InsertHotel(BaseModel):
    name: str
    location: str
    description: str
    imageUrl: str
    pricePerNight: int
    rating: int = Field(ge=0, le=50)
    amenities: List[str] = Field(default_factory=list)


class Hotel(InsertHotel):
    id: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def displayRating(self) -> str:
        return format_rating(self.rating)


# ---------- TransportOption ----------


TransportType = Literal["flight", "train", "bus"]


class InsertTransportOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: TransportType
    from_: str = Field(alias="from")
    to: str
    price: int
    duration: str
    provider: str
    imageUrl: Optional[str] = None


class TransportOption(InsertTransportOption):
    id: str


# ---------- Review ----------


class InsertReview(BaseModel):
    userId: Optional[str] = None
    userName: str
    userAvatar: str
    rating: int = Field(ge=1, le=5)
    content: str
    destination: str
    tripDate: str
    verified: bool = True


class Review(InsertReview):
    id: str


# ---------- User ----------


class InsertUser(BaseModel):
    username: str
    password: str
    email: str
    preferences: Optional[Dict[str, Any]] = None


class User(InsertUser):
    id: str


# ---------- TravelPlan ----------


class TravelPlanRequest(BaseModel):
    destination: str = Field(min_length=1)
    startDate: str
    endDate: str
    budget: int = Field(gt=0)
    travelStyle: str
    interests: List[str]


class CreateTravelPlanRequest(TravelPlanRequest):
    userId: Optional[str] = None


class TravelPlan(CreateTravelPlanRequest):
    id: str
    itinerary: GeneratedItinerary
    createdAt: datetime


# ---------- Chat ----------


class ChatRequest(BaseModel):
    message: Optional[str] = None
    context: Optional[Any] = None


class ChatResponse(BaseModel):
    response: str


# ---------- Insights ----------


class WeatherInsight(BaseModel):
    condition: str
    temperature: str
    description: str


class CrowdInsight(BaseModel):
    level: str
    description: str


class CurrencyInsight(BaseModel):
    rate: str
    lastUpdated: str


class Insights(BaseModel):
    weather: WeatherInsight
    crowdLevel: CrowdInsight
    currency: CurrencyInsight
