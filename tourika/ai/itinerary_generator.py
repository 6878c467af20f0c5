from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, TypedDict

from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, StateGraph
from openai import AsyncOpenAI
from pydantic import ValidationError as SchemaValidationError

from tourika.ai.openai_client import get_client
from tourika.ai.prompts import ITINERARY_SYSTEM_PROMPT, build_itinerary_prompt
from tourika.api.models.schemas import GeneratedItinerary, TravelPlanRequest
from tourika.core.config import settings
from tourika.core.errors import ItineraryGenerationError, MalformedItineraryError

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate travel plan. Please try again."


class ItineraryState(TypedDict):
    request: TravelPlanRequest
    prompt: str
    raw_content: Optional[str]
    itinerary: Optional[GeneratedItinerary]


async def compose_prompt(state: ItineraryState) -> Dict[str, Any]:
    return {"prompt": build_itinerary_prompt(state["request"])}


async def request_itinerary(state: ItineraryState, config: RunnableConfig) -> Dict[str, Any]:
    client: AsyncOpenAI = config["configurable"]["client"]
    response = await client.chat.completions.create(
        model=settings.openai_model_itinerary,
        messages=[
            {"role": "system", "content": ITINERARY_SYSTEM_PROMPT},
            {"role": "user", "content": state["prompt"]},
        ],
        response_format={"type": "json_object"},
        temperature=settings.itinerary_temperature,
    )
    return {"raw_content": response.choices[0].message.content}


async def parse_itinerary(state: ItineraryState) -> Dict[str, Any]:
    content = state["raw_content"] or "{}"
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise MalformedItineraryError(f"Itinerary response is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise MalformedItineraryError("Itinerary response must be a JSON object")
    try:
        itinerary = GeneratedItinerary.model_validate(payload)
    except SchemaValidationError as exc:
        raise MalformedItineraryError(
            f"Itinerary response does not match the expected schema ({exc.error_count()} errors)"
        ) from exc
    return {"itinerary": itinerary}


def build_itinerary_graph():
    builder = StateGraph(ItineraryState)
    builder.add_node("compose_prompt", compose_prompt)
    builder.add_node("request_itinerary", request_itinerary)
    builder.add_node("parse_itinerary", parse_itinerary)

    builder.set_entry_point("compose_prompt")
    builder.add_edge("compose_prompt", "request_itinerary")
    builder.add_edge("request_itinerary", "parse_itinerary")
    builder.add_edge("parse_itinerary", END)
    return builder.compile()


_GRAPH = build_itinerary_graph()


async def generate_travel_plan(
    request: TravelPlanRequest, client: Optional[AsyncOpenAI] = None
) -> GeneratedItinerary:
    """
    Ask the language model for a day-by-day itinerary and validate its JSON answer.
    Any failure surfaces as ItineraryGenerationError; there is no retry and no partial result.
    """
    initial_state: ItineraryState = {
        "request": request,
        "prompt": "",
        "raw_content": None,
        "itinerary": None,
    }
    try:
        result = await _GRAPH.ainvoke(
            initial_state, config={"configurable": {"client": client or get_client()}}
        )
    except MalformedItineraryError as exc:
        logger.error("Malformed itinerary from OpenAI for %s: %s", request.destination, exc)
        raise
    except Exception as exc:
        logger.exception("OpenAI API error while generating itinerary: %s", exc)
        raise ItineraryGenerationError(GENERATION_FAILED_MESSAGE) from exc

    itinerary = result.get("itinerary")
    if itinerary is None:
        raise MalformedItineraryError("Itinerary graph finished without an itinerary")
    return itinerary
