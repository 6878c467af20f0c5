"""Sample rows loaded into the store at startup."""

from typing import List

from tourika.api.models.schemas import Destination, Hotel, Review, TransportOption

SEED_DESTINATIONS: List[Destination] = [
    Destination(
        id="dest-1",
        name="Tokyo, Japan",
        country="Japan",
        description="Cultural heritage meets modern innovation",
        imageUrl="https://images.unsplash.com/photo-1492571350019-22de08371fd3",
        price=1200,
        rating=48,
        currency="USD",
    ),
    Destination(
        id="dest-2",
        name="Santorini, Greece",
        country="Greece",
        description="Stunning sunsets and pristine beaches",
        imageUrl="https://images.unsplash.com/photo-1570077188670-e3a8d69ac5ff",
        price=800,
        rating=49,
        currency="USD",
    ),
    Destination(
        id="dest-3",
        name="Machu Picchu, Peru",
        country="Peru",
        description="Ancient wonder and breathtaking views",
        imageUrl="https://images.unsplash.com/photo-1526392060635-9d6019884377",
        price=600,
        rating=47,
        currency="USD",
    ),
    Destination(
        id="dest-4",
        name="Reykjavik, Iceland",
        country="Iceland",
        description="Northern lights and natural wonders",
        imageUrl="https://images.unsplash.com/photo-1508672019048-805c876b67e2",
        price=900,
        rating=46,
        currency="USD",
    ),
]

SEED_HOTELS: List[Hotel] = [
    Hotel(
        id="hotel-1",
        name="Hotel Granvia Tokyo",
        location="Tokyo, Japan",
        description="Modern luxury hotel with city views",
        imageUrl="https://images.unsplash.com/photo-1566073771259-6a8506099945",
        pricePerNight=180,
        rating=45,
        amenities=["WiFi", "Gym", "Restaurant", "Spa"],
    ),
    Hotel(
        id="hotel-2",
        name="Park Hyatt Tokyo",
        location="Tokyo, Japan",
        description="Ultra-luxury hotel with panoramic views",
        imageUrl="https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b",
        pricePerNight=420,
        rating=48,
        amenities=["WiFi", "Gym", "Restaurant", "Spa", "Pool", "Concierge"],
    ),
]

SEED_TRANSPORT: List[TransportOption] = [
    TransportOption(
        id="trans-1",
        type="flight",
        from_="New York",
        to="Tokyo",
        price=850,
        duration="14h 25m",
        provider="American Airlines",
        imageUrl="https://images.unsplash.com/photo-1436491865332-7a61a109cc05",
    ),
    TransportOption(
        id="trans-2",
        type="train",
        from_="Paris",
        to="London",
        price=120,
        duration="2h 15m",
        provider="Eurostar",
        imageUrl="https://images.unsplash.com/photo-1544620347-c4fd4a3d5957",
    ),
]

SEED_REVIEWS: List[Review] = [
    Review(
        id="review-1",
        userId="user-1",
        userName="Sarah Johnson",
        userAvatar="https://images.unsplash.com/photo-1494790108755-2616b612b372",
        rating=5,
        content=(
            "Tourika's AI completely transformed my trip to Italy. The personalized recommendations "
            "were spot-on, and I discovered hidden gems I never would have found otherwise."
        ),
        destination="Italy",
        tripDate="March 2024",
        verified=True,
    ),
    Review(
        id="review-2",
        userId="user-2",
        userName="Michael Chen",
        userAvatar="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d",
        rating=4,
        content=(
            "Perfect for business travelers. The AI understood my tight schedule and created an "
            "efficient itinerary that maximized my limited free time in Singapore."
        ),
        destination="Singapore",
        tripDate="February 2024",
        verified=True,
    ),
    Review(
        id="review-3",
        userId="user-3",
        userName="Emma Rodriguez",
        userAvatar="https://images.unsplash.com/photo-1438761681033-6461ffad8d80",
        rating=5,
        content=(
            "As a student on a budget, Tourika helped me plan an incredible backpacking trip through "
            "Southeast Asia. The budget tracking feature was invaluable!"
        ),
        destination="Thailand & Vietnam",
        tripDate="January 2024",
        verified=True,
    ),
]
