from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
import sys

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from motor.motor_asyncio import AsyncIOMotorDatabase
from mongomock_motor import AsyncMongoMockClient

SERVICE_ROOT = Path(__file__).resolve().parents[1]
if str(SERVICE_ROOT) not in sys.path:
    sys.path.insert(0, str(SERVICE_ROOT))

from social_api.main import app
from social_api.db import close_mongo_connection, connect_to_mongo, get_db
from social_api.config import get_settings
from social_api.repositories.user import UserRepository
from social_api.models.user import User


@pytest.fixture(autouse=True)
def _env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/test")
    monkeypatch.setenv("MONGO_DB_NAME", "social-api-test")
    monkeypatch.delenv("MEMBER_TYPE_IDS", raising=False)
    monkeypatch.delenv("SYMMETRIC_UNSUBSCRIBE", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest_asyncio.fixture
async def mongo_client(monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[AsyncMongoMockClient]:
    client = AsyncMongoMockClient()

    def _client_factory(*_args, **_kwargs) -> AsyncMongoMockClient:
        return client

    monkeypatch.setattr("social_api.db.AsyncIOMotorClient", _client_factory)
    yield client
    client.close()


@pytest_asyncio.fixture
async def database(mongo_client: AsyncMongoMockClient) -> AsyncIterator[AsyncIOMotorDatabase]:
    await connect_to_mongo()
    yield get_db()
    await close_mongo_connection()


@pytest_asyncio.fixture
async def api_client(database: AsyncIOMotorDatabase) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_user(database: AsyncIOMotorDatabase):
    repo = UserRepository(database)

    async def _make_user(first_name: str = "Ada", subscribed_to: list[str] | None = None) -> User:
        return await repo.insert(
            {
                "firstName": first_name,
                "lastName": "Lovelace",
                "email": f"{first_name.lower()}@example.com",
                "subscribedToUserIds": list(subscribed_to or []),
            }
        )

    return _make_user
