"""Domain layer - errors raised by catalog operations.

Example usage:
    from app.domain import ProductNotFoundError

    raise ProductNotFoundError(product_id=42)
"""

from app.domain.exceptions import (
    DomainError,
    ProductError,
    ProductIdMismatchError,
    ProductNotFoundError,
)

__all__ = [
    "DomainError",
    "ProductError",
    "ProductIdMismatchError",
    "ProductNotFoundError",
]
