"""Tests for the in-memory travel store."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tourika.api.models.schemas import (
    GeneratedItinerary,
    InsertDestination,
    InsertHotel,
    InsertReview,
    InsertTransportOption,
    InsertUser,
)
from tourika.domain.models import TravelPlanEntity
from tourika.domain.repositories import InMemoryTravelRepository


def _make_plan(plan_id: str, itinerary_payload, user_id=None) -> TravelPlanEntity:
    return TravelPlanEntity(
        id=plan_id,
        destination="Tokyo, Japan",
        start_date="2025-04-01",
        end_date="2025-04-02",
        budget=2000,
        travel_style="cultural",
        interests=["food"],
        itinerary=GeneratedItinerary.model_validate(itinerary_payload),
        created_at=datetime.now(timezone.utc),
        user_id=user_id,
    )


@pytest.mark.asyncio
async def test_new_store_is_empty_until_seeded():
    store = InMemoryTravelRepository()
    assert await store.list_destinations() == []

    store.seed()
    destinations = await store.list_destinations()
    assert [d.id for d in destinations] == ["dest-1", "dest-2", "dest-3", "dest-4"]
    assert len(await store.list_hotels()) == 2
    assert len(await store.list_transport_options()) == 2
    assert len(await store.list_reviews()) == 3
    assert await store.list_users() == []


@pytest.mark.asyncio
async def test_seeding_copies_rows_per_store():
    first = InMemoryTravelRepository().seed()
    second = InMemoryTravelRepository().seed()
    (await first.get_destination("dest-1")).name = "Changed"
    assert (await second.get_destination("dest-1")).name == "Tokyo, Japan"


@pytest.mark.asyncio
@pytest.mark.parametrize("dest_id", ["dest-1", "dest-2", "dest-3", "dest-4"])
async def test_destination_name_substring_finds_destination(repo, dest_id):
    destination = await repo.get_destination(dest_id)
    needle = destination.name[2:7].upper()
    results = await repo.list_destinations(needle)
    assert destination in results


@pytest.mark.asyncio
async def test_destination_search_matches_country_and_description(repo):
    assert [d.id for d in await repo.list_destinations("iceland")] == ["dest-4"]
    assert [d.id for d in await repo.list_destinations("SUNSETS")] == ["dest-2"]
    assert await repo.list_destinations("atlantis") == []


@pytest.mark.asyncio
async def test_hotels_filtered_by_location(repo):
    hotels = await repo.list_hotels("Tokyo")
    assert {h.id for h in hotels} == {"hotel-1", "hotel-2"}
    assert all("tokyo" in h.location.lower() for h in hotels)
    assert {h.id for h in await repo.list_hotels("tokyo")} == {"hotel-1", "hotel-2"}
    assert await repo.list_hotels("Paris") == []


@pytest.mark.asyncio
async def test_transport_filters_combine(repo):
    assert [o.id for o in await repo.list_transport_options(origin="new york")] == ["trans-1"]
    assert [o.id for o in await repo.list_transport_options(destination="LONDON")] == ["trans-2"]
    assert await repo.list_transport_options(origin="Paris", destination="Tokyo") == []
    assert [o.id for o in await repo.list_transport_options(origin="par", destination="lon")] == ["trans-2"]


@pytest.mark.asyncio
async def test_reviews_filtered_by_destination(repo):
    assert [r.id for r in await repo.list_reviews("vietnam")] == ["review-3"]


@pytest.mark.asyncio
async def test_missing_ids_raise_key_error(repo):
    for lookup in (
        repo.get_destination,
        repo.get_hotel,
        repo.get_transport_option,
        repo.get_review,
        repo.get_travel_plan,
        repo.get_user,
    ):
        with pytest.raises(KeyError):
            await lookup("does-not-exist")


@pytest.mark.asyncio
async def test_create_assigns_unique_ids_and_defaults(repo):
    destination = await repo.create_destination(
        InsertDestination(
            name="Lisbon, Portugal",
            country="Portugal",
            description="Trams and pastel de nata",
            imageUrl="https://example.com/lisbon.jpg",
            price=700,
            rating=45,
        )
    )
    assert destination.id.startswith("dest_")
    assert destination.currency == "USD"
    assert await repo.get_destination(destination.id) == destination

    hotel = await repo.create_hotel(
        InsertHotel(
            name="Tokyo Station Hotel",
            location="Tokyo, Japan",
            description="Historic hotel",
            imageUrl="https://example.com/hotel.jpg",
            pricePerNight=300,
            rating=47,
        )
    )
    assert hotel.amenities == []
    assert len(await repo.list_hotels("tokyo")) == 3

    option = await repo.create_transport_option(
        InsertTransportOption(type="bus", from_="Lyon", to="Geneva", price=25, duration="2h", provider="FlixBus")
    )
    assert option.imageUrl is None
    assert await repo.get_transport_option(option.id) == option

    review = await repo.create_review(
        InsertReview(
            userName="Ana",
            userAvatar="https://example.com/ana.png",
            rating=4,
            content="Lovely",
            destination="Lisbon",
            tripDate="May 2024",
        )
    )
    assert review.verified is True
    assert review.userId is None

    ids = {destination.id, hotel.id, option.id, review.id}
    assert len(ids) == 4


@pytest.mark.asyncio
async def test_users_by_id_and_username(repo):
    user = await repo.create_user(InsertUser(username="mika", password="secret", email="mika@example.com"))
    assert user.preferences is None
    assert await repo.get_user(user.id) == user
    assert await repo.get_user_by_username("mika") == user
    with pytest.raises(KeyError):
        await repo.get_user_by_username("nobody")


@pytest.mark.asyncio
async def test_travel_plans_filtered_by_user(repo, itinerary_payload):
    await repo.save_travel_plan(_make_plan("plan_a", itinerary_payload, user_id="user-1"))
    await repo.save_travel_plan(_make_plan("plan_b", itinerary_payload))

    assert [p.id for p in await repo.list_travel_plans()] == ["plan_a", "plan_b"]
    assert [p.id for p in await repo.list_travel_plans("user-1")] == ["plan_a"]
    assert await repo.list_travel_plans("user-2") == []


@pytest.mark.asyncio
async def test_saving_duplicate_plan_id_is_rejected(repo, itinerary_payload):
    await repo.save_travel_plan(_make_plan("plan_a", itinerary_payload))
    with pytest.raises(ValueError):
        await repo.save_travel_plan(_make_plan("plan_a", itinerary_payload))
