"""Pytest configuration and shared fakes for the Tourika API."""
from __future__ import annotations

import copy
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

# Ensure the project root is on sys.path so that `import tourika` works without installing.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from tourika.dependencies import get_llm_client  # noqa: E402
from tourika.domain.repositories import InMemoryTravelRepository  # noqa: E402
from tourika.main import create_app  # noqa: E402

SAMPLE_ITINERARY: Dict[str, Any] = {
    "days": [
        {
            "day": 1,
            "title": "Arrival in Shinjuku",
            "description": "Settle in and explore the neighbourhood",
            "activities": ["Check in", "Omoide Yokocho dinner"],
            "estimatedCost": 120,
            "category": "Food",
        },
        {
            "day": 2,
            "title": "Temples and gardens",
            "description": "Classic Tokyo sights",
            "activities": ["Senso-ji", "Shinjuku Gyoen"],
            "estimatedCost": 80,
            "category": "Cultural",
        },
    ],
    "totalEstimatedCost": 1900,
    "budgetUsed": 95,
    "recommendations": {
        "weather": "Mild spring days",
        "crowdLevel": "High during cherry blossom season",
        "bestTimeToVisit": "Late March to early April",
        "currency": "Japanese Yen (JPY)",
    },
}


class FakeCompletions:
    """Stands in for `AsyncOpenAI().chat.completions`."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.content: Optional[str] = None
        self.error: Optional[Exception] = None

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeLLM:
    def __init__(self) -> None:
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)

    def reply(self, content: Optional[str]) -> "FakeLLM":
        self.completions.content = content
        self.completions.error = None
        return self

    def reply_json(self, payload: Any) -> "FakeLLM":
        return self.reply(json.dumps(payload))

    def fail(self, error: Exception) -> "FakeLLM":
        self.completions.error = error
        return self

    @property
    def calls(self) -> List[Dict[str, Any]]:
        return self.completions.calls


@pytest.fixture
def itinerary_payload() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_ITINERARY)


@pytest.fixture
def fake_llm(itinerary_payload: Dict[str, Any]) -> FakeLLM:
    return FakeLLM().reply_json(itinerary_payload)


@pytest.fixture
def repo() -> InMemoryTravelRepository:
    return InMemoryTravelRepository().seed()


@pytest.fixture
def client(repo: InMemoryTravelRepository, fake_llm: FakeLLM) -> TestClient:
    app = create_app(repository=repo)
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    with TestClient(app) as test_client:
        yield test_client
