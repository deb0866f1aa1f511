from decimal import Decimal
from typing import Any

from bson.decimal128 import Decimal128

from models.employees import EmployeeDB
from repositories.base_repository import MongoRepository
from services.performance_monitor import monitor_query


class EmployeeRepository(MongoRepository[EmployeeDB]):
    """
    Employees embed {departmentId, name} and {employeeId, name} references.
    The embedded display names are kept in sync by the rename helpers below.
    """

    collection_name = "employees"
    model = EmployeeDB
    resource_type = "Employee"

    def _to_document(self, entity: EmployeeDB) -> dict[str, Any]:
        document = super()._to_document(entity)
        if isinstance(document.get("salary"), Decimal):
            document["salary"] = Decimal128(document["salary"])
        return document

    def _from_document(self, document: dict[str, Any]) -> EmployeeDB:
        if isinstance(document.get("salary"), Decimal128):
            document = {**document, "salary": document["salary"].to_decimal()}
        return super()._from_document(document)

    @monitor_query("count_employees_by_department")
    async def count_by_department(self, department_id: int) -> int:
        return await self.collection.count_documents({"department.departmentId": department_id})

    @monitor_query("rename_department_on_employees")
    async def rename_department(self, department_id: int, name: str) -> int:
        result = await self.collection.update_many(
            {"department.departmentId": department_id}, {"$set": {"department.name": name}}
        )
        return result.modified_count

    @monitor_query("rename_manager_on_employees")
    async def rename_manager(self, manager_id: int, name: str) -> int:
        result = await self.collection.update_many(
            {"manager.employeeId": manager_id}, {"$set": {"manager.name": name}}
        )
        return result.modified_count

    @monitor_query("clear_manager_on_employees")
    async def clear_manager(self, manager_id: int) -> int:
        result = await self.collection.update_many(
            {"manager.employeeId": manager_id}, {"$set": {"manager": None}}
        )
        return result.modified_count

    async def ensure_indexes(self) -> None:
        await self.collection.create_index(
            "department.departmentId", name="employee_department_idx"
        )
        await self.collection.create_index("manager.employeeId", name="employee_manager_idx")
