from models.departments import DepartmentDB
from repositories.base_repository import MongoRepository
from services.performance_monitor import monitor_query


class DepartmentRepository(MongoRepository[DepartmentDB]):
    collection_name = "departments"
    model = DepartmentDB
    resource_type = "Department"

    @monitor_query("exists_department_by_name")
    async def exists_by_name(self, name: str, exclude_id: int | None = None) -> bool:
        query: dict = {"name": name}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}
        return await self.collection.count_documents(query, limit=1) > 0

    async def ensure_indexes(self) -> None:
        await self.collection.create_index("name", unique=True, name="department_name_idx")
