from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from mappers import CustomerMapper
from models.customers import CustomerRequest, CustomerResponse
from models.responses import DeleteResponse
from repositories import CustomerRepository
from services import CustomerService

router = APIRouter()


def get_customer_service(request: Request) -> CustomerService:
    return CustomerService(CustomerRepository(request.app.state.mongodb), CustomerMapper())


@router.get("", response_description="List all customers", response_model=list[CustomerResponse])
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    customers = await service.get_all()
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(customers))


@router.get("/{id}", response_description="Get a single customer", response_model=CustomerResponse)
async def get_customer(
    id: int, service: CustomerService = Depends(get_customer_service)
) -> JSONResponse:
    customer = await service.get_by_id(id)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(customer))


@router.post("", response_description="Add new customer", response_model=CustomerResponse)
async def create_customer(
    customer: CustomerRequest | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    created = await service.create(customer)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(created))


@router.put("/{id}", response_description="Update customer", response_model=CustomerResponse)
async def update_customer(
    id: int,
    customer: CustomerRequest | None = None,
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    updated = await service.update(id, customer)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(updated))


@router.delete("/{id}", response_description="Delete customer", response_model=DeleteResponse)
async def delete_customer(
    id: int, service: CustomerService = Depends(get_customer_service)
) -> JSONResponse:
    deleted_count = await service.delete(id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=jsonable_encoder(
            DeleteResponse(
                deleted_count=deleted_count, message=f"Customer '{id}' deleted successfully"
            )
        ),
    )
