import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..config import Settings, get_settings
from .mongo import ensure_indexes, seed_member_types

_client: Optional[AsyncIOMotorClient] = None
_db: Optional[AsyncIOMotorDatabase] = None


async def _prepare_database(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    logger = logging.getLogger("uvicorn.error")
    try:
        await ensure_indexes(db)
    except Exception as exc:  # pragma: no cover - best-effort logging
        logger.error("Failed to ensure indexes: %s", exc)
    await seed_member_types(db, settings.member_type_ids)


async def connect_to_mongo() -> None:
    """Initialise the shared MongoDB client and the service database."""

    global _client, _db

    settings = get_settings()
    if not settings.mongo_uri:
        raise RuntimeError("Missing MONGO_URI env var for social-api")

    logger = logging.getLogger("uvicorn.error")
    client = AsyncIOMotorClient(
        settings.mongo_uri,
        maxPoolSize=20,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        connectTimeoutMS=settings.mongo_connect_timeout_ms,
        socketTimeoutMS=settings.mongo_socket_timeout_ms,
        **({"directConnection": True} if settings.mongo_direct else {}),
    )
    db = client[settings.mongo_db]

    try:
        await client.admin.command("ping")
        await _prepare_database(db, settings)
    except Exception as exc:
        logger.error("MongoDB connection failed: %s", exc)
        client.close()
        raise

    _client, _db = client, db
    addr = getattr(_client, "address", None)
    if addr:
        logger.info("MongoDB connected: db=%s, primary=%s:%s", settings.mongo_db, addr[0], addr[1])
    else:
        logger.info("MongoDB connected: db=%s", settings.mongo_db)


async def close_mongo_connection() -> None:
    """Close the MongoDB client if it is initialised."""

    global _client, _db
    if _client:
        try:
            _client.close()
        finally:
            logging.getLogger("uvicorn.error").info("MongoDB connection closed")
        _client = None
        _db = None


def is_connected() -> bool:
    return _client is not None and _db is not None


def get_db() -> AsyncIOMotorDatabase:
    if _db is None:
        raise RuntimeError("MongoDB database not connected. Did you call connect_to_mongo()?")
    return _db


def get_client() -> AsyncIOMotorClient:
    if _client is None:
        raise RuntimeError("Mongo client not initialised. Did you call connect_to_mongo()?")
    return _client


__all__ = [
    "connect_to_mongo",
    "close_mongo_connection",
    "is_connected",
    "get_db",
    "get_client",
]
