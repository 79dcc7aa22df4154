"""Generic record store over a single MongoDB collection."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, Iterator, Mapping, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..models.identifiers import new_record_id
from .exceptions import DuplicateKeyRepositoryError, NotFoundRepositoryError, RepositoryError

LOGGER = logging.getLogger("uvicorn.error")

RecordT = TypeVar("RecordT", bound=BaseModel)


@contextmanager
def store_errors(action: str, collection: str) -> Iterator[None]:
    try:
        yield
    except DuplicateKeyError as exc:
        LOGGER.debug("Duplicate key on %s in %s: %s", action, collection, exc)
        raise DuplicateKeyRepositoryError(
            f"{collection}: duplicate key on {action}", collection=collection, action=action
        ) from exc
    except PyMongoError as exc:
        LOGGER.error("Store failure on %s in %s: %s", action, collection, exc)
        raise RepositoryError(
            f"{collection}: {action} failed", collection=collection, action=action
        ) from exc


class RecordRepository(Generic[RecordT]):
    """Point lookups, filtered scans and single-record writes for one entity kind.

    Every write touches exactly one document and is atomic on its own; there
    is no multi-document transaction. Scan predicates are MongoDB filter
    documents.
    """

    collection_name: ClassVar[str]
    record_model: ClassVar[Type[BaseModel]]
    entity_label: ClassVar[str] = "record"

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._database = database
        self._collection: AsyncIOMotorCollection = database[self.collection_name]

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self._collection

    def _to_record(self, doc: Mapping[str, Any]) -> RecordT:
        return self.record_model(**doc)  # type: ignore[return-value]

    async def get(self, record_id: str) -> Optional[RecordT]:
        with store_errors("get", self.collection_name):
            doc = await self._collection.find_one({"_id": record_id})
        return self._to_record(doc) if doc else None

    async def find_one(self, query: Mapping[str, Any]) -> Optional[RecordT]:
        with store_errors("find_one", self.collection_name):
            doc = await self._collection.find_one(dict(query))
        return self._to_record(doc) if doc else None

    async def scan(self, query: Optional[Mapping[str, Any]] = None) -> list[RecordT]:
        records: list[RecordT] = []
        with store_errors("scan", self.collection_name):
            async for doc in self._collection.find(dict(query or {})):
                records.append(self._to_record(doc))
        return records

    async def insert(self, fields: Mapping[str, Any]) -> RecordT:
        """Insert a new record under a freshly generated identifier."""

        doc = {"_id": new_record_id(), **fields}
        with store_errors("insert", self.collection_name):
            await self._collection.insert_one(doc)
        return self._to_record(doc)

    async def update(self, record_id: str, patch: Mapping[str, Any]) -> RecordT:
        with store_errors("update", self.collection_name):
            doc = await self._collection.find_one_and_update(
                {"_id": record_id},
                {"$set": dict(patch)},
                return_document=ReturnDocument.AFTER,
            )
        if not doc:
            raise NotFoundRepositoryError(
                f"{self.entity_label} not found", collection=self.collection_name, action="update"
            )
        return self._to_record(doc)

    async def remove(self, record_id: str) -> RecordT:
        with store_errors("remove", self.collection_name):
            doc = await self._collection.find_one_and_delete({"_id": record_id})
        if not doc:
            raise NotFoundRepositoryError(
                f"{self.entity_label} not found", collection=self.collection_name, action="remove"
            )
        return self._to_record(doc)


__all__ = ["RecordRepository", "store_errors"]
