"""
Department Service - CRUD use cases for departments

Employees embed the department name, so renames and deletes also look at
the employee repository.
"""
from exceptions import (
    DuplicateResourceException,
    ResourceInUseException,
    ResourceNotFoundException,
    ValidationException,
)
from logging_config import logger
from models.departments import DepartmentDB, DepartmentRequest, DepartmentResponse


class DepartmentService:
    """Service for department CRUD operations"""

    def __init__(self, repository, mapper, employee_repository):
        self.repository = repository
        self.mapper = mapper
        self.employee_repository = employee_repository

    async def get_all(self) -> list[DepartmentResponse]:
        departments = await self.repository.find_all()
        return [self.mapper.to_response(department) for department in departments]

    async def get_by_id(self, department_id: int) -> DepartmentResponse:
        department = await self._get_existing(department_id)
        return self.mapper.to_response(department)

    async def create(self, request: DepartmentRequest | None) -> DepartmentResponse:
        """
        Raises:
            ValidationException: If the request is missing or has no name
            DuplicateResourceException: If a department with that name exists
        """
        self._validate_request(request)
        if await self.repository.exists_by_name(request.name):
            raise DuplicateResourceException("Department", "name", request.name)

        saved = await self.repository.save(self.mapper.to_entity(request))
        logger.info(
            "Department created", extra={"department_id": saved.id, "department_name": saved.name}
        )
        return self.mapper.to_response(saved)

    async def update(
        self, department_id: int, request: DepartmentRequest | None
    ) -> DepartmentResponse:
        self._validate_request(request)
        department = await self._get_existing(department_id)

        renamed = department.name != request.name
        if renamed and await self.repository.exists_by_name(request.name, exclude_id=department_id):
            raise DuplicateResourceException("Department", "name", request.name)

        department.name = request.name
        department.location = request.location
        saved = await self.repository.save(department)

        if renamed:
            updated = await self.employee_repository.rename_department(saved.id, saved.name)
            logger.info(
                "Department renamed",
                extra={"department_id": saved.id, "employees_updated": updated},
            )
        return self.mapper.to_response(saved)

    async def delete(self, department_id: int) -> int:
        """
        Raises:
            ResourceNotFoundException: If no department has this id
            ResourceInUseException: If employees still belong to the department
        """
        await self._get_existing(department_id)
        employee_count = await self.employee_repository.count_by_department(department_id)
        if employee_count > 0:
            raise ResourceInUseException(
                "Department",
                department_id,
                f"Department '{department_id}' still has {employee_count} employee(s)",
                {"employee_count": employee_count},
            )
        deleted_count = await self.repository.delete_by_id(department_id)
        logger.info("Department deleted", extra={"department_id": department_id})
        return deleted_count

    async def _get_existing(self, department_id: int) -> DepartmentDB:
        department = await self.repository.find_by_id(department_id)
        if department is None:
            raise ResourceNotFoundException(resource_type="Department", resource_id=department_id)
        return department

    @staticmethod
    def _validate_request(request: DepartmentRequest | None) -> None:
        if request is None:
            raise ValidationException("request", "Department request must not be None")
        if request.name is None or not request.name.strip():
            raise ValidationException("name", "Name must not be empty", {"value": request.name})
