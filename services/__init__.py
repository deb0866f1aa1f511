# Services package
from .customer_service import CustomerService
from .department_service import DepartmentService
from .employee_service import EmployeeService

__all__ = ["CustomerService", "DepartmentService", "EmployeeService"]
