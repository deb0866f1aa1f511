# Exceptions package
from .custom_exceptions import (
    DuplicateResourceException,
    ResourceInUseException,
    ResourceNotFoundException,
    ShopException,
    ValidationException,
)

__all__ = [
    'ShopException',
    'ResourceNotFoundException',
    'ValidationException',
    'DuplicateResourceException',
    'ResourceInUseException',
]
