"""
Base Repository - CRUD primitives over a single MongoDB collection

Entities carry sequential integer ids. New ids come from the ``counters``
collection, one document per entity collection, incremented atomically.
"""
from typing import Any, Generic, TypeVar

from pymongo import ReturnDocument

from exceptions import ResourceNotFoundException
from logging_config import logger
from models.base import MongoBaseModel
from services.performance_monitor import monitor_query

T = TypeVar("T", bound=MongoBaseModel)

COUNTERS_COLLECTION = "counters"


class MongoRepository(Generic[T]):
    """Generic repository; subclasses set the collection, model and resource type"""

    collection_name: str = ""
    model: type[T]
    resource_type: str = ""

    def __init__(self, mongodb):
        self.db = mongodb
        self.collection = mongodb[self.collection_name]

    def _to_document(self, entity: T) -> dict[str, Any]:
        return entity.model_dump(by_alias=True)

    def _from_document(self, document: dict[str, Any]) -> T:
        return self.model(**document)

    async def _next_id(self) -> int:
        counter = await self.db[COUNTERS_COLLECTION].find_one_and_update(
            {"_id": self.collection_name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    @monitor_query("find_by_id")
    async def find_by_id(self, entity_id: int) -> T | None:
        document = await self.collection.find_one({"_id": entity_id})
        if document is None:
            return None
        return self._from_document(document)

    @monitor_query("find_all")
    async def find_all(self) -> list[T]:
        documents = await self.collection.find({}).sort("_id", 1).to_list(length=None)
        return [self._from_document(document) for document in documents]

    @monitor_query("save")
    async def save(self, entity: T) -> T:
        """
        Persist an entity.

        A new entity (``id is None``) is inserted under a fresh id and the
        returned copy carries that id; the passed instance stays untouched.
        An existing entity is replaced in place and returned as is.
        """
        if entity.is_new():
            entity = entity.model_copy(update={"id": await self._next_id()})
            await self.collection.insert_one(self._to_document(entity))
            logger.debug(
                f"Inserted {self.resource_type}",
                extra={"collection": self.collection_name, "id": entity.id},
            )
            return entity

        await self.collection.replace_one(
            {"_id": entity.id}, self._to_document(entity), upsert=True
        )
        logger.debug(
            f"Replaced {self.resource_type}",
            extra={"collection": self.collection_name, "id": entity.id},
        )
        return entity

    async def save_all(self, entities: list[T]) -> list[T]:
        return [await self.save(entity) for entity in entities]

    @monitor_query("delete_by_id")
    async def delete_by_id(self, entity_id: int) -> int:
        """Delete by id and return the deleted count; raises ResourceNotFoundException if none"""
        result = await self.collection.delete_one({"_id": entity_id})
        if result.deleted_count == 0:
            raise ResourceNotFoundException(
                resource_type=self.resource_type, resource_id=entity_id
            )
        return result.deleted_count

    async def delete(self, entity: T) -> int:
        if entity.is_new():
            raise ResourceNotFoundException(resource_type=self.resource_type, resource_id=None)
        return await self.delete_by_id(entity.id)

    @monitor_query("delete_all")
    async def delete_all(self) -> int:
        result = await self.collection.delete_many({})
        return result.deleted_count

    @monitor_query("exists_by_id")
    async def exists_by_id(self, entity_id: int) -> bool:
        return await self.collection.count_documents({"_id": entity_id}, limit=1) > 0

    @monitor_query("count")
    async def count(self) -> int:
        return await self.collection.count_documents({})

    async def ensure_indexes(self) -> None:
        """Create collection specific indexes; nothing by default"""
        return None
