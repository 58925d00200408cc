"""API schemas for the Inventory API.

Pydantic models for request/response validation and serialization.
Bodies use camelCase field names; snake_case names are accepted on input.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices travel as JSON numbers
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All structured API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(CamelModel):
    """Request to create a product.

    Any id, isActive or createdAt sent by the client is ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    description: str | None = Field(
        default=None, max_length=2000, description="Product description"
    )
    price: Decimal = Field(
        ..., ge=0, max_digits=12, decimal_places=2, description="Unit price"
    )
    stock_quantity: int = Field(..., ge=0, description="Units in stock")
    category: str = Field(
        ..., min_length=1, max_length=100, description="Product category"
    )


class ProductUpdateRequest(ProductCreateRequest):
    """Request to replace a product's editable fields.

    The id must match the id in the request path.
    """

    id: int = Field(..., description="Product identifier")


class ProductResponse(CamelModel):
    """Product representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: JsonDecimal = Field(..., description="Unit price")
    stock_quantity: int = Field(..., description="Units in stock")
    category: str = Field(..., description="Product category")
    is_active: bool = Field(..., description="False once soft-deleted")
    created_at: datetime = Field(..., description="When the product was created")
    updated_at: datetime | None = Field(
        default=None, description="When the product was last updated or deleted"
    )
