from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from mappers import EmployeeMapper
from models.employees import EmployeeRequest, EmployeeResponse
from models.responses import DeleteResponse
from repositories import DepartmentRepository, EmployeeRepository
from services import EmployeeService

router = APIRouter()


def get_employee_service(request: Request) -> EmployeeService:
    mongodb = request.app.state.mongodb
    return EmployeeService(
        EmployeeRepository(mongodb), EmployeeMapper(), DepartmentRepository(mongodb)
    )


# list all employees
@router.get("", response_description="List all employees", response_model=list[EmployeeResponse])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    employees = await service.get_all()
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(employees))


# get employee by id
@router.get(
    "/{id}", response_description="Get a single employee", response_model=EmployeeResponse
)
async def get_employee(
    id: int, service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    employee = await service.get_by_id(id)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(employee))


# create new employee
@router.post("", response_description="Add new employee", response_model=EmployeeResponse)
async def create_employee(
    employee: EmployeeRequest | None = None,
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    created = await service.create(employee)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(created))


# update employee
@router.put("/{id}", response_description="Update employee", response_model=EmployeeResponse)
async def update_employee(
    id: int,
    employee: EmployeeRequest | None = None,
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    updated = await service.update(id, employee)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(updated))


# delete employee
@router.delete("/{id}", response_description="Delete employee", response_model=DeleteResponse)
async def delete_employee(
    id: int, service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    deleted_count = await service.delete(id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=jsonable_encoder(
            DeleteResponse(
                deleted_count=deleted_count, message=f"Employee '{id}' deleted successfully"
            )
        ),
    )
