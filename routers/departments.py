from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from mappers import DepartmentMapper
from models.departments import DepartmentRequest, DepartmentResponse
from models.responses import DeleteResponse
from repositories import DepartmentRepository, EmployeeRepository
from services import DepartmentService

router = APIRouter()


def get_department_service(request: Request) -> DepartmentService:
    mongodb = request.app.state.mongodb
    return DepartmentService(
        DepartmentRepository(mongodb), DepartmentMapper(), EmployeeRepository(mongodb)
    )


# list all departments
@router.get("", response_description="List all departments", response_model=list[DepartmentResponse])
async def list_departments(
    service: DepartmentService = Depends(get_department_service),
) -> JSONResponse:
    departments = await service.get_all()
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(departments))


# get department by id
@router.get(
    "/{id}", response_description="Get a single department", response_model=DepartmentResponse
)
async def get_department(
    id: int, service: DepartmentService = Depends(get_department_service)
) -> JSONResponse:
    department = await service.get_by_id(id)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(department))


# create new department
@router.post(
    "",
    response_description="Add new department",
    response_model=DepartmentResponse,
    responses={409: {"description": "Department name already exists"}},
)
async def create_department(
    department: DepartmentRequest | None = None,
    service: DepartmentService = Depends(get_department_service),
) -> JSONResponse:
    created = await service.create(department)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(created))


# update department
@router.put("/{id}", response_description="Update department", response_model=DepartmentResponse)
async def update_department(
    id: int,
    department: DepartmentRequest | None = None,
    service: DepartmentService = Depends(get_department_service),
) -> JSONResponse:
    updated = await service.update(id, department)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(updated))


# delete department
@router.delete("/{id}", response_description="Delete department", response_model=DeleteResponse)
async def delete_department(
    id: int, service: DepartmentService = Depends(get_department_service)
) -> JSONResponse:
    deleted_count = await service.delete(id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=jsonable_encoder(
            DeleteResponse(
                deleted_count=deleted_count, message=f"Department '{id}' deleted successfully"
            )
        ),
    )
