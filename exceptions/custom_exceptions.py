"""
Custom Exception Classes for the Online Shop Backend

Provides a hierarchy of exceptions for better error handling and consistent error responses.
All custom exceptions inherit from ShopException which includes status codes and details.
"""

from typing import Any


class ShopException(Exception):
    """Base exception for all backend errors"""

    def __init__(self, message: str, status_code: int = 500, details: dict[Any, Any] | None = None):
        """
        Args:
            message: Human-readable error message
            status_code: HTTP status code for the error
            details: Additional context as a dictionary
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundException(ShopException):
    """Raised when a requested resource doesn't exist"""

    def __init__(
        self, resource_type: str, resource_id: Any = "", details: dict[Any, Any] | None = None
    ):
        """
        Args:
            resource_type: Type of resource (e.g., 'Employee', 'Department', 'Customer')
            resource_id: ID of the missing resource
            details: Additional context

        Example:
            raise ResourceNotFoundException('Employee', employee_id)
        """
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type} with resource ID '{resource_id}' not found"
        extra_details = {"resource_type": resource_type, "resource_id": resource_id}
        if details:
            extra_details.update(details)
        super().__init__(message, status_code=404, details=extra_details)


class ValidationException(ShopException):
    """Raised when input validation fails"""

    def __init__(self, field: str, message: str, details: dict[Any, Any] | None = None):
        """
        Args:
            field: Name of the field that failed validation
            message: Description of the validation error
            details: Additional context

        Example:
            raise ValidationException('name', 'must not be empty', {'value': request.name})
        """
        self.field = field
        full_message = f"Validation error on field '{field}': {message}"
        extra_details = {"field": field}
        if details:
            extra_details.update(details)
        super().__init__(full_message, status_code=400, details=extra_details)


class DuplicateResourceException(ShopException):
    """Raised when a resource with the same unique value already exists"""

    def __init__(
        self, resource_type: str, field: str, value: Any, details: dict[Any, Any] | None = None
    ):
        """
        Args:
            resource_type: Type of resource (e.g., 'Department')
            field: Name of the unique field
            value: The conflicting value

        Example:
            raise DuplicateResourceException('Department', 'name', 'IT')
        """
        self.resource_type = resource_type
        self.field = field
        message = f"{resource_type} with {field} '{value}' already exists"
        extra_details = {"resource_type": resource_type, "field": field, "value": value}
        if details:
            extra_details.update(details)
        super().__init__(message, status_code=409, details=extra_details)


class ResourceInUseException(ShopException):
    """Raised when a resource cannot be removed because others still reference it"""

    def __init__(
        self,
        resource_type: str,
        resource_id: Any,
        message: str = "",
        details: dict[Any, Any] | None = None,
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        error_message = message or f"{resource_type} with resource ID '{resource_id}' is still in use"
        extra_details = {"resource_type": resource_type, "resource_id": resource_id}
        if details:
            extra_details.update(details)
        super().__init__(error_message, status_code=409, details=extra_details)
