# Repositories package
from .customer_repository import CustomerRepository
from .department_repository import DepartmentRepository
from .employee_repository import EmployeeRepository

__all__ = ["CustomerRepository", "DepartmentRepository", "EmployeeRepository"]
