"""
Customer Service - CRUD use cases for customers
"""
from exceptions import ResourceNotFoundException, ValidationException
from logging_config import logger
from models.customers import CustomerDB, CustomerRequest, CustomerResponse


class CustomerService:
    """Service for customer CRUD operations"""

    def __init__(self, repository, mapper):
        self.repository = repository
        self.mapper = mapper

    async def get_all(self) -> list[CustomerResponse]:
        customers = await self.repository.find_all()
        return [self.mapper.to_response(customer) for customer in customers]

    async def get_by_id(self, customer_id: int) -> CustomerResponse:
        customer = await self._get_existing(customer_id)
        return self.mapper.to_response(customer)

    async def create(self, request: CustomerRequest | None) -> CustomerResponse:
        self._validate_request(request)
        saved = await self.repository.save(self.mapper.to_entity(request))
        logger.info("Customer created", extra={"customer_id": saved.id})
        return self.mapper.to_response(saved)

    async def update(self, customer_id: int, request: CustomerRequest | None) -> CustomerResponse:
        self._validate_request(request)
        customer = await self._get_existing(customer_id)
        customer.name = request.name
        customer.city = request.city
        saved = await self.repository.save(customer)
        return self.mapper.to_response(saved)

    async def delete(self, customer_id: int) -> int:
        await self._get_existing(customer_id)
        deleted_count = await self.repository.delete_by_id(customer_id)
        logger.info("Customer deleted", extra={"customer_id": customer_id})
        return deleted_count

    async def _get_existing(self, customer_id: int) -> CustomerDB:
        customer = await self.repository.find_by_id(customer_id)
        if customer is None:
            raise ResourceNotFoundException(resource_type="Customer", resource_id=customer_id)
        return customer

    @staticmethod
    def _validate_request(request: CustomerRequest | None) -> None:
        if request is None:
            raise ValidationException("request", "Customer request must not be None")
        if request.name is None or not request.name.strip():
            raise ValidationException("name", "Name must not be empty", {"value": request.name})
