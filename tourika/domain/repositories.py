import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import uuid4

from tourika.api.models.schemas import (
    Destination,
    Hotel,
    InsertDestination,
    InsertHotel,
    InsertReview,
    InsertTransportOption,
    InsertUser,
    Review,
    TransportOption,
    User,
)
from tourika.domain import seed

from .models import TravelPlanEntity

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def _contains(value: Optional[str], needle: str) -> bool:
    return needle.casefold() in (value or "").casefold()


class TravelRepository(ABC):
    # ---------- users ----------

    @abstractmethod
    async def list_users(self) -> List[User]:
        raise NotImplementedError

    @abstractmethod
    async def get_user(self, user_id: str) -> User:
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User:
        raise NotImplementedError

    @abstractmethod
    async def create_user(self, user: InsertUser) -> User:
        raise NotImplementedError

    # ---------- destinations ----------

    @abstractmethod
    async def list_destinations(self, search: Optional[str] = None) -> List[Destination]:
        raise NotImplementedError

    @abstractmethod
    async def get_destination(self, destination_id: str) -> Destination:
        raise NotImplementedError

    @abstractmethod
    async def create_destination(self, destination: InsertDestination) -> Destination:
        raise NotImplementedError

    # ---------- travel plans ----------

    @abstractmethod
    async def list_travel_plans(self, user_id: Optional[str] = None) -> List[TravelPlanEntity]:
        raise NotImplementedError

    @abstractmethod
    async def get_travel_plan(self, plan_id: str) -> TravelPlanEntity:
        raise NotImplementedError

    @abstractmethod
    async def save_travel_plan(self, plan: TravelPlanEntity) -> TravelPlanEntity:
        raise NotImplementedError

    # ---------- hotels ----------

    @abstractmethod
    async def list_hotels(self, location: Optional[str] = None) -> List[Hotel]:
        raise NotImplementedError

    @abstractmethod
    async def get_hotel(self, hotel_id: str) -> Hotel:
        raise NotImplementedError

    @abstractmethod
    async def create_hotel(self, hotel: InsertHotel) -> Hotel:
        raise NotImplementedError

    # ---------- transport ----------

    @abstractmethod
    async def list_transport_options(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ) -> List[TransportOption]:
        raise NotImplementedError

    @abstractmethod
    async def get_transport_option(self, option_id: str) -> TransportOption:
        raise NotImplementedError

    @abstractmethod
    async def create_transport_option(self, option: InsertTransportOption) -> TransportOption:
        raise NotImplementedError

    # ---------- reviews ----------

    @abstractmethod
    async def list_reviews(self, destination: Optional[str] = None) -> List[Review]:
        raise NotImplementedError

    @abstractmethod
    async def get_review(self, review_id: str) -> Review:
        raise NotImplementedError

    @abstractmethod
    async def create_review(self, review: InsertReview) -> Review:
        raise NotImplementedError


class InMemoryTravelRepository(TravelRepository):
    """
    Dict-per-collection store. Starts empty; call seed() to load the sample rows.
    Lookups of unknown ids raise KeyError, which the routers turn into 404s.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._destinations: Dict[str, Destination] = {}
        self._travel_plans: Dict[str, TravelPlanEntity] = {}
        self._hotels: Dict[str, Hotel] = {}
        self._transport: Dict[str, TransportOption] = {}
        self._reviews: Dict[str, Review] = {}

    def seed(self) -> "InMemoryTravelRepository":
        for destination in seed.SEED_DESTINATIONS:
            self._destinations[destination.id] = destination.model_copy(deep=True)
        for hotel in seed.SEED_HOTELS:
            self._hotels[hotel.id] = hotel.model_copy(deep=True)
        for option in seed.SEED_TRANSPORT:
            self._transport[option.id] = option.model_copy(deep=True)
        for review in seed.SEED_REVIEWS:
            self._reviews[review.id] = review.model_copy(deep=True)
        logger.info(
            "Seeded store: %d destinations, %d hotels, %d transport options, %d reviews",
            len(self._destinations),
            len(self._hotels),
            len(self._transport),
            len(self._reviews),
        )
        return self

    # ---------- users ----------

    async def list_users(self) -> List[User]:
        return list(self._users.values())

    async def get_user(self, user_id: str) -> User:
        if user_id not in self._users:
            raise KeyError("User not found")
        return self._users[user_id]

    async def get_user_by_username(self, username: str) -> User:
        for user in self._users.values():
            if user.username == username:
                return user
        raise KeyError("User not found")

    async def create_user(self, user: InsertUser) -> User:
        record = User(id=_new_id("user"), **user.model_dump())
        self._users[record.id] = record
        return record

    # ---------- destinations ----------

    async def list_destinations(self, search: Optional[str] = None) -> List[Destination]:
        destinations = list(self._destinations.values())
        if not search:
            return destinations
        return [
            d
            for d in destinations
            if _contains(d.name, search) or _contains(d.country, search) or _contains(d.description, search)
        ]

    async def get_destination(self, destination_id: str) -> Destination:
        if destination_id not in self._destinations:
            raise KeyError("Destination not found")
        return self._destinations[destination_id]

    async def create_destination(self, destination: InsertDestination) -> Destination:
        record = Destination(id=_new_id("dest"), **destination.model_dump())
        self._destinations[record.id] = record
        return record

    # ---------- travel plans ----------

    async def list_travel_plans(self, user_id: Optional[str] = None) -> List[TravelPlanEntity]:
        plans = list(self._travel_plans.values())
        if user_id:
            return [plan for plan in plans if plan.user_id == user_id]
        return plans

    async def get_travel_plan(self, plan_id: str) -> TravelPlanEntity:
        if plan_id not in self._travel_plans:
            raise KeyError("Travel plan not found")
        return self._travel_plans[plan_id]

    async def save_travel_plan(self, plan: TravelPlanEntity) -> TravelPlanEntity:
        if plan.id in self._travel_plans:
            raise ValueError(f"Travel plan {plan.id} already exists")
        self._travel_plans[plan.id] = plan
        return plan

    # ---------- hotels ----------

    async def list_hotels(self, location: Optional[str] = None) -> List[Hotel]:
        hotels = list(self._hotels.values())
        if location:
            return [h for h in hotels if _contains(h.location, location)]
        return hotels

    async def get_hotel(self, hotel_id: str) -> Hotel:
        if hotel_id not in self._hotels:
            raise KeyError("Hotel not found")
        return self._hotels[hotel_id]

    async def create_hotel(self, hotel: InsertHotel) -> Hotel:
        record = Hotel(id=_new_id("hotel"), **hotel.model_dump())
        self._hotels[record.id] = record
        return record

    # ---------- transport ----------

    async def list_transport_options(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ) -> List[TransportOption]:
        options = list(self._transport.values())
        if origin:
            options = [o for o in options if _contains(o.from_, origin)]
        if destination:
            options = [o for o in options if _contains(o.to, destination)]
        return options

    async def get_transport_option(self, option_id: str) -> TransportOption:
        if option_id not in self._transport:
            raise KeyError("Transport option not found")
        return self._transport[option_id]

    async def create_transport_option(self, option: InsertTransportOption) -> TransportOption:
        record = TransportOption(id=_new_id("trans"), **option.model_dump())
        self._transport[record.id] = record
        return record

    # ---------- reviews ----------

    async def list_reviews(self, destination: Optional[str] = None) -> List[Review]:
        reviews = list(self._reviews.values())
        if destination:
            return [r for r in reviews if _contains(r.destination, destination)]
        return reviews

    async def get_review(self, review_id: str) -> Review:
        if review_id not in self._reviews:
            raise KeyError("Review not found")
        return self._reviews[review_id]

    async def create_review(self, review: InsertReview) -> Review:
        record = Review(id=_new_id("review"), **review.model_dump())
        self._reviews[record.id] = record
        return record
