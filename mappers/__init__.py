# Mappers package
from .customer_mapper import CustomerMapper
from .department_mapper import DepartmentMapper
from .employee_mapper import EmployeeMapper

__all__ = ["CustomerMapper", "DepartmentMapper", "EmployeeMapper"]
