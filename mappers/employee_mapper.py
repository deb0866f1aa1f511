"""
Employee Mapper - translation between employee DTOs and the stored entity

Pure structural transforms: no lookups, no I/O, no state. Relations are
resolved by the service, the mapper only renders them.
"""
from exceptions import ValidationException
from models.employees import EmployeeDB, EmployeeRequest, EmployeeResponse


class EmployeeMapper:

    def to_entity(self, request: EmployeeRequest | None) -> EmployeeDB:
        """
        Build a new, never persisted employee from a request.

        Raises:
            ValidationException: If request is None
        """
        if request is None:
            raise ValidationException("request", "Employee request must not be None")
        return EmployeeDB(
            name=request.name,
            position=request.position,
            salary=request.salary,
        )

    def to_response(self, entity: EmployeeDB | None) -> EmployeeResponse:
        """
        Build the API response for a persisted employee.

        Raises:
            ValidationException: If entity is None
        """
        if entity is None:
            raise ValidationException("entity", "Employee entity must not be None")
        return EmployeeResponse(
            id=entity.id,
            name=entity.name,
            position=entity.position,
            salary=entity.salary,
            departmentName=entity.department.name if entity.department else None,
            managerName=entity.manager.name if entity.manager else None,
        )
