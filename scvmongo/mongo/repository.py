"""Generic MongoDB repository over pydantic entity models."""

import logging
from typing import Any, Mapping, Optional, TypeVar

from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from scvmongo.repository import Repository

from .exceptions import DecodeError, NotFoundError, PersistenceError, QueryError
from .models import MongoModel, parse_object_id

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=MongoModel)

# Document encoding happens inside the driver call; unencodable values raise
# BSONError, and native UUIDs without a uuidRepresentation raise ValueError
WRITE_ERRORS = (PyMongoError, BSONError, ValueError)


class MongoRepository(Repository[T]):
    """
    CRUD over one collection, decoding documents into `target`.

    Every operation is a single round trip. Driver failures are wrapped,
    never retried; identifiers are validated before the driver is called.
    """

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        target: type[T],
        database: AsyncIOMotorDatabase | None = None,
    ):
        self.collection = collection
        self.target = target
        self.database = database

    @classmethod
    def for_collection(
        cls,
        database: AsyncIOMotorDatabase,
        name: str,
        target: type[T],
    ) -> "MongoRepository[T]":
        """Build a repository for `database[name]`."""
        return cls(collection=database[name], target=target, database=database)

    @property
    def collection_name(self) -> str:
        return getattr(self.collection, "name", self.target.__name__)

    def _decode(self, document: Mapping[str, Any]) -> T:
        try:
            return self.target.model_validate(document)
        except ValidationError as e:
            logger.warning(
                f"Cannot decode document {document.get('_id')} from "
                f"{self.collection_name} into {self.target.__name__}"
            )
            raise DecodeError(
                f"cannot decode document {document.get('_id')} into "
                f"{self.target.__name__}: {e}",
                cause=e,
            ) from e

    async def create(self, entity: T) -> str:
        try:
            result = await self.collection.insert_one(entity.to_document())
        except WRITE_ERRORS as e:
            logger.error(f"Insert into {self.collection_name} failed: {e}")
            raise PersistenceError(str(e), cause=e) from e

        return str(result.inserted_id)

    async def get(
        self,
        filter: Optional[Mapping[str, Any]] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[T]:
        if skip is not None and skip < 0:
            raise ValueError(f"skip must be >= 0, got {skip}")
        if take is not None and take < 0:
            raise ValueError(f"take must be >= 0, got {take}")

        # MongoDB reads limit=0 as "no limit"
        if take == 0:
            return []

        options: dict[str, int] = {}
        if skip:
            options["skip"] = skip
        if take is not None:
            options["limit"] = take

        cursor = self.collection.find(dict(filter or {}), **options)

        results: list[T] = []
        try:
            async for document in cursor:
                results.append(self._decode(document))
        except PyMongoError as e:
            logger.error(f"Find on {self.collection_name} failed: {e}")
            raise QueryError(str(e), cause=e) from e
        finally:
            await cursor.close()

        return results

    async def get_by_id(self, id: str) -> T:
        object_id = parse_object_id(id)

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Find one on {self.collection_name} failed: {e}")
            raise QueryError(str(e), cause=e) from e

        if document is None:
            raise NotFoundError(f"no document with id {id} in {self.collection_name}")

        return self._decode(document)

    async def update(self, id: str, entity: T) -> None:
        object_id = parse_object_id(id)
        fields = entity.to_document()

        try:
            if fields:
                result = await self.collection.update_one(
                    {"_id": object_id}, {"$set": fields}
                )
                matched = result.matched_count
            else:
                # $set rejects an empty document; nothing to merge, only check existence
                matched = await self.collection.count_documents(
                    {"_id": object_id}, limit=1
                )
        except WRITE_ERRORS as e:
            logger.error(f"Update on {self.collection_name} failed: {e}")
            raise PersistenceError(str(e), cause=e) from e

        # An unchanged document still counts as matched
        if matched == 0:
            raise NotFoundError(f"no document with id {id} in {self.collection_name}")

    async def delete(self, id: str) -> None:
        object_id = parse_object_id(id)

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Delete on {self.collection_name} failed: {e}")
            raise PersistenceError(str(e), cause=e) from e

        if result.deleted_count == 0:
            raise NotFoundError(f"no document with id {id} in {self.collection_name}")
