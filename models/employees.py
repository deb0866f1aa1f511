from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from models.base import MongoBaseModel, decimal_to_number

# Employees
# ------------

# Salaries fit Decimal128 and render as JSON numbers without rounding
SALARY_MAX_DIGITS = 15
SALARY_DECIMAL_PLACES = 2


def salary_fits(value: Decimal) -> bool:
    """True when value is finite and within the salary digit limits"""
    if not value.is_finite():
        return False
    _, digits, exponent = value.as_tuple()
    # trailing fractional zeros do not count, 50000.00 is 50000
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    if exponent >= 0:
        return len(digits) + exponent <= SALARY_MAX_DIGITS
    return max(len(digits), -exponent) <= SALARY_MAX_DIGITS and -exponent <= SALARY_DECIMAL_PLACES


# sub documents
class EmployeeDepartment(BaseModel):
    departmentId: int = Field(...)
    name: str = Field(...)


class EmployeeManager(BaseModel):
    employeeId: int = Field(...)
    name: str = Field(...)


class EmployeeDB(MongoBaseModel):
    name: str = Field(...)
    position: str | None = None
    salary: Decimal = Field(
        ..., max_digits=SALARY_MAX_DIGITS, decimal_places=SALARY_DECIMAL_PLACES
    )
    department: EmployeeDepartment | None = None
    manager: EmployeeManager | None = None


class EmployeeRequest(BaseModel):
    name: str | None = None
    position: str | None = None
    salary: Decimal | None = Field(
        default=None, max_digits=SALARY_MAX_DIGITS, decimal_places=SALARY_DECIMAL_PLACES
    )
    departmentId: int | None = None
    managerId: int | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "position": "Developer",
                "salary": 50000,
                "departmentId": 1,
                "managerId": None,
            }
        }
    )


class EmployeeResponse(BaseModel):
    id: int = Field(...)
    name: str = Field(...)
    position: str | None = None
    salary: Decimal = Field(...)
    departmentName: str | None = None
    managerName: str | None = None

    @field_serializer("salary")
    def serialize_salary(self, salary: Decimal):
        return decimal_to_number(salary)
