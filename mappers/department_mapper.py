from exceptions import ValidationException
from models.departments import DepartmentDB, DepartmentRequest, DepartmentResponse


class DepartmentMapper:
    """Pure transforms between department DTOs and the stored entity"""

    def to_entity(self, request: DepartmentRequest | None) -> DepartmentDB:
        if request is None:
            raise ValidationException("request", "Department request must not be None")
        return DepartmentDB(name=request.name, location=request.location)

    def to_response(self, entity: DepartmentDB | None) -> DepartmentResponse:
        if entity is None:
            raise ValidationException("entity", "Department entity must not be None")
        return DepartmentResponse(id=entity.id, name=entity.name, location=entity.location)
