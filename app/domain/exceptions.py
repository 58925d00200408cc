"""Domain exceptions.

Errors raised by the catalog service when a request cannot be applied
to the stored products. The API layer maps them to HTTP responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Product Errors
# ============================================================================


class ProductError(DomainError):
    """Base class for product-related errors."""

    pass


class ProductNotFoundError(ProductError):
    """Raised when no active product exists for an ID.

    Covers both missing rows and soft-deleted products.
    """

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID that was looked up.
        """
        super().__init__(
            f"Product {product_id} not found",
            details={"product_id": product_id},
        )


class ProductIdMismatchError(ProductError):
    """Raised when the path ID and the payload ID of an update differ."""

    def __init__(self, path_id: int, payload_id: int) -> None:
        """Initialize product ID mismatch error.

        Args:
            path_id: ID from the request path.
            payload_id: ID from the request body.
        """
        super().__init__(
            f"Path id {path_id} does not match payload id {payload_id}",
            details={"path_id": path_id, "payload_id": payload_id},
        )
