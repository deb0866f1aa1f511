from exceptions import ValidationException
from models.customers import CustomerDB, CustomerRequest, CustomerResponse


class CustomerMapper:
    """Pure transforms between customer DTOs and the stored entity"""

    def to_entity(self, request: CustomerRequest | None) -> CustomerDB:
        if request is None:
            raise ValidationException("request", "Customer request must not be None")
        return CustomerDB(name=request.name, city=request.city)

    def to_response(self, entity: CustomerDB | None) -> CustomerResponse:
        if entity is None:
            raise ValidationException("entity", "Customer entity must not be None")
        return CustomerResponse(id=entity.id, name=entity.name, city=entity.city)
