"""Prompt templates for itinerary generation and chat."""

import json
from typing import Any, Optional

from tourika.api.models.schemas import TravelPlanRequest

ITINERARY_SYSTEM_PROMPT = (
    "You are an expert travel planner with deep knowledge of destinations worldwide. "
    "Create detailed, personalized travel itineraries that maximize value within the given budget. "
    "Always respond with valid JSON."
)

ITINERARY_JSON_SHAPE = """{
  "days": [
    {
      "day": 1,
      "title": "Day title",
      "description": "Brief description of the day",
      "activities": ["Activity 1", "Activity 2"],
      "estimatedCost": 120,
      "category": "Cultural"
    }
  ],
  "totalEstimatedCost": 2850,
  "budgetUsed": 95,
  "recommendations": {
    "weather": "Weather description",
    "crowdLevel": "Crowd level info",
    "bestTimeToVisit": "Best time info",
    "currency": "Currency info"
  }
}"""

CHAT_SYSTEM_PROMPT = (
    "You are Tourika, a helpful AI travel assistant. "
    "Be friendly, informative, and concise in your responses."
)


def build_itinerary_prompt(request: TravelPlanRequest) -> str:
    return (
        "Generate a detailed travel itinerary for the following request:\n\n"
        f"Destination: {request.destination}\n"
        f"Travel Dates: {request.startDate} to {request.endDate}\n"
        f"Budget: ${request.budget}\n"
        f"Travel Style: {request.travelStyle}\n"
        f"Interests: {', '.join(request.interests)}\n\n"
        "Please create a day-by-day itinerary that includes:\n"
        "- Daily activities and attractions\n"
        "- Estimated costs for each day\n"
        "- Categories for each activity (Cultural, Adventure, Food, etc.)\n"
        "- Weather and crowd level insights\n"
        "- Currency information\n"
        "- Best time to visit recommendations\n\n"
        "Format the response as JSON with this structure:\n"
        f"{ITINERARY_JSON_SHAPE}"
    )


def build_chat_prompt(message: str, context: Optional[Any] = None) -> str:
    lines = [
        "You are Tourika, a friendly AI travel assistant. Help users with travel planning questions.",
        "",
        f"User message: {message}",
    ]
    if context is not None:
        lines.append(f"Context: {json.dumps(context, ensure_ascii=False, default=str)}")
    lines.append("")
    lines.append("Provide a helpful, concise response about travel planning, destinations, or booking assistance.")
    return "\n".join(lines)
