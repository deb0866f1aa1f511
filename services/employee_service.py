"""
Employee Service - CRUD use cases for employees

Collaborators (employee repository, mapper, department repository) are
passed in by the caller; the service itself holds no state.
"""
from exceptions import ResourceNotFoundException, ValidationException
from logging_config import logger
from models.employees import (
    SALARY_DECIMAL_PLACES,
    SALARY_MAX_DIGITS,
    EmployeeDB,
    EmployeeDepartment,
    EmployeeManager,
    EmployeeRequest,
    EmployeeResponse,
    salary_fits,
)


class EmployeeService:
    """Service for employee CRUD operations"""

    def __init__(self, repository, mapper, department_repository):
        self.repository = repository
        self.mapper = mapper
        self.department_repository = department_repository

    async def get_all(self) -> list[EmployeeResponse]:
        """
        Get all employees in store order.

        Returns:
            List of employee responses, empty when no employees exist
        """
        employees = await self.repository.find_all()
        logger.debug("Fetched employees", extra={"count": len(employees)})
        return [self.mapper.to_response(employee) for employee in employees]

    async def get_by_id(self, employee_id: int) -> EmployeeResponse:
        """
        Get a single employee.

        Raises:
            ResourceNotFoundException: If no employee has this id
        """
        employee = await self._get_existing(employee_id)
        return self.mapper.to_response(employee)

    async def create(self, request: EmployeeRequest | None) -> EmployeeResponse:
        """
        Create an employee.

        The response is built from the instance returned by the repository's
        save, so the assigned id is included.

        Raises:
            ValidationException: If the request is missing or invalid
            ResourceNotFoundException: If departmentId or managerId is unknown
        """
        self._validate_request(request)
        logger.info("Creating employee", extra={"employee_name": request.name})

        employee = self.mapper.to_entity(request)
        await self._apply_relations(employee, request)
        saved = await self.repository.save(employee)

        logger.info("Employee created", extra={"employee_id": saved.id})
        return self.mapper.to_response(saved)

    async def update(self, employee_id: int, request: EmployeeRequest | None) -> EmployeeResponse:
        """
        Overwrite name, position and salary of an existing employee.

        Department and manager are kept unless the request supplies a new
        departmentId / managerId. The request is validated before the
        existence check.

        Raises:
            ValidationException: If the request is missing or invalid
            ResourceNotFoundException: If the employee, or a referenced
                department or manager, does not exist
        """
        self._validate_request(request)
        employee = await self._get_existing(employee_id)
        logger.info("Updating employee", extra={"employee_id": employee_id})

        previous_name = employee.name
        employee.name = request.name
        employee.position = request.position
        employee.salary = request.salary
        await self._apply_relations(employee, request)

        saved = await self.repository.save(employee)

        if saved.name != previous_name:
            # subordinates show the manager's name
            await self.repository.rename_manager(saved.id, saved.name)

        return self.mapper.to_response(saved)

    async def delete(self, employee_id: int) -> int:
        """
        Delete an existing employee. Employees managed by it lose their manager.

        Raises:
            ResourceNotFoundException: If no employee has this id
        """
        await self._get_existing(employee_id)
        deleted_count = await self.repository.delete_by_id(employee_id)
        await self.repository.clear_manager(employee_id)
        logger.info("Employee deleted", extra={"employee_id": employee_id})
        return deleted_count

    async def _get_existing(self, employee_id: int) -> EmployeeDB:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise ResourceNotFoundException(resource_type="Employee", resource_id=employee_id)
        return employee

    async def _apply_relations(self, employee: EmployeeDB, request: EmployeeRequest) -> None:
        if request.departmentId is not None:
            department = await self.department_repository.find_by_id(request.departmentId)
            if department is None:
                raise ResourceNotFoundException(
                    resource_type="Department",
                    resource_id=request.departmentId,
                    details={"query_field": "departmentId"},
                )
            employee.department = EmployeeDepartment(
                departmentId=department.id, name=department.name
            )

        if request.managerId is not None:
            if employee.id is not None and request.managerId == employee.id:
                raise ValidationException(
                    "managerId", "An employee cannot be their own manager",
                    {"value": request.managerId},
                )
            manager = await self.repository.find_by_id(request.managerId)
            if manager is None:
                raise ResourceNotFoundException(
                    resource_type="Employee",
                    resource_id=request.managerId,
                    details={"query_field": "managerId"},
                )
            employee.manager = EmployeeManager(employeeId=manager.id, name=manager.name)

    @staticmethod
    def _validate_request(request: EmployeeRequest | None) -> None:
        if request is None:
            raise ValidationException("request", "Employee request must not be None")
        if request.name is None or not request.name.strip():
            raise ValidationException("name", "Name must not be empty", {"value": request.name})
        if request.salary is None:
            raise ValidationException("salary", "Salary is required")
        if not salary_fits(request.salary):
            raise ValidationException(
                "salary",
                f"Salary must have at most {SALARY_MAX_DIGITS} digits"
                f" and {SALARY_DECIMAL_PLACES} decimal places",
                {"value": str(request.salary)},
            )
        if request.salary < 0:
            raise ValidationException(
                "salary", "Salary must not be negative", {"value": str(request.salary)}
            )
