"""Shared pytest fixtures for all test suites."""

import json
import os
from collections.abc import AsyncGenerator, Callable

# Must be set before app.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.models.trip import Trip  # noqa: F401  registers the table
from app.services.serpapi_client import SerpApiClient

SERPAPI_BASE = "https://serpapi.test"


class StubLLM:
    """Stands in for LLMClient: returns a canned answer and records prompts."""

    def __init__(self, response: str = "", configured: bool = True, error: Exception | None = None):
        self.response = response
        self.configured = configured
        self.error = error
        self.calls: list[dict] = []
        self.closed = False

    async def complete(self, system: str, user: str, **kwargs) -> str:
        self.calls.append({"system": system, "user": user, **kwargs})
        if self.error:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


def _itinerary_json(num_days: int = 3, **overrides) -> str:
    """A well-formed model answer for a trip of `num_days` days."""
    payload = {
        "days": [
            {
                "day": i,
                "title": f"Day {i} in Goa",
                "morning": "Beach walk",
                "afternoon": "Fort visit",
                "evening": "Seafood dinner",
                "estimated_cost": 2500,
            }
            for i in range(1, num_days + 1)
        ],
        "budget_breakdown": {"transport": 1, "stay": 1, "food": 1, "activities": 1},
        "tips": ["Carry sunscreen"],
        "best_attractions": ["Baga Beach", "Fort Aguada"],
    }
    payload.update(overrides)
    return json.dumps(payload)


@pytest.fixture
def itinerary_json() -> Callable[..., str]:
    return _itinerary_json


@pytest.fixture
def stub_llm_factory() -> Callable[..., StubLLM]:
    return StubLLM


@pytest.fixture
def serpapi_factory() -> Callable[..., tuple[SerpApiClient, list[httpx.Request]]]:
    """Build a configured SerpApiClient whose HTTP traffic goes to `handler`.

    Returns the client and the list of requests it sent.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response], api_key: str = "test-key"):
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return SerpApiClient(api_key=api_key, base_url=SERPAPI_BASE, client=http), sent

    return _make


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """In-memory SQLite session with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
