"""Product API endpoints.

Provides the inventory CRUD surface:
- GET /products - list active products (filter, sort, paginate)
- GET /products/search - search active products by name or description
- GET /products/{id} - product details
- POST /products - create a product
- PUT /products/{id} - replace a product's editable fields
- DELETE /products/{id} - soft delete a product

Pagination metadata is returned in the X-Total-Count and X-Total-Pages
headers rather than in the body.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from app.catalog.models import Product
from app.catalog.service import (
    CatalogService,
    PaginatedResult,
    PaginationParams,
    ProductData,
    ProductFilter,
)
from app.catalog.sorting import SortKey
from app.domain.exceptions import ProductNotFoundError
from app.infrastructure.config import settings
from app.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])

TOTAL_COUNT_HEADER = "X-Total-Count"
TOTAL_PAGES_HEADER = "X-Total-Pages"
LOW_STOCK_HEADER = "X-Low-Stock-Alert"

# Keeps the computed row offset within a 64-bit integer
MAX_PAGE = 2**31 - 1


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get a catalog service bound to the request's session."""
    return CatalogService(session)


# ============================================================================
# Converters
# ============================================================================


def to_product_data(payload: ProductCreateRequest) -> ProductData:
    """Convert a request body to editable product fields."""
    return ProductData(
        name=payload.name,
        description=payload.description,
        price=payload.price,
        stock_quantity=payload.stock_quantity,
        category=payload.category,
    )


def page_to_response(
    result: PaginatedResult[Product], response: Response
) -> list[ProductResponse]:
    """Write pagination headers and convert the page items."""
    response.headers[TOTAL_COUNT_HEADER] = str(result.total)
    response.headers[TOTAL_PAGES_HEADER] = str(result.total_pages)
    return [ProductResponse.model_validate(p) for p in result.items]


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductResponse],
    responses={400: {"model": ErrorResponse}},
    summary="List products",
    description="Get a page of active products with optional category filter and sorting.",
)
async def list_products(
    response: Response,
    service: Annotated[CatalogService, Depends(get_service)],
    category: str | None = Query(default=None, description="Exact category to filter by"),
    sort_by: str | None = Query(
        default=None,
        alias="sortBy",
        description="price_asc, price_desc; anything else sorts by name",
    ),
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="Page number"),
    page_size: int = Query(
        default=settings.default_page_size,
        alias="pageSize",
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    ),
) -> list[ProductResponse]:
    """List active products.

    Args:
        response: Outgoing response, used for pagination headers.
        service: Catalog service.
        category: Exact category filter.
        sort_by: Sort key.
        page: Page number (1-based).
        page_size: Items per page.

    Returns:
        Products on the requested page.
    """
    result = await service.list_products(
        ProductFilter(category=category),
        PaginationParams(
            page=page,
            page_size=page_size,
            sort_key=SortKey.parse(sort_by),
        ),
    )
    return page_to_response(result, response)


@router.get(
    "/search",
    response_model=list[ProductResponse],
    responses={400: {"model": ErrorResponse}},
    summary="Search products",
    description="Search active products whose name or description contains the query.",
)
async def search_products(
    response: Response,
    service: Annotated[CatalogService, Depends(get_service)],
    query: str = Query(..., min_length=1, description="Text to search for"),
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="Page number"),
    page_size: int = Query(
        default=settings.default_page_size,
        alias="pageSize",
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    ),
) -> list[ProductResponse]:
    """Search active products by name or description.

    Args:
        response: Outgoing response, used for pagination headers.
        service: Catalog service.
        query: Search text.
        page: Page number (1-based).
        page_size: Items per page.

    Returns:
        Matching products on the requested page.
    """
    result = await service.search_products(query, page=page, page_size=page_size)
    return page_to_response(result, response)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"description": "Product not found or deleted"}},
    summary="Get product",
    description="Get an active product by ID.",
)
async def get_product(
    product_id: int,
    response: Response,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by ID.

    Adds X-Low-Stock-Alert when stock is below the configured threshold.

    Args:
        product_id: Product identifier.
        response: Outgoing response, used for the low stock header.
        service: Catalog service.

    Returns:
        Product details.

    Raises:
        ProductNotFoundError: If no active product has this ID.
    """
    product = await service.get_product(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)

    if product.stock_quantity < settings.low_stock_threshold:
        response.headers[LOW_STOCK_HEADER] = "true"

    return ProductResponse.model_validate(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
    description="Create a product. The Location header points at the new product.",
)
async def create_product(
    payload: ProductCreateRequest,
    request: Request,
    response: Response,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Create a product.

    Args:
        payload: Product fields.
        request: Incoming request, used to build the Location URL.
        response: Outgoing response.
        service: Catalog service.

    Returns:
        Created product.
    """
    product = await service.create_product(to_product_data(payload))

    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    return ProductResponse.model_validate(product)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        404: {"description": "Product not found or deleted"},
    },
    summary="Update product",
    description="Replace name, description, price, stock quantity and category.",
)
async def update_product(
    product_id: int,
    payload: ProductUpdateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Update a product.

    Args:
        product_id: Product identifier from the path.
        payload: Full product body including its id.
        service: Catalog service.

    Returns:
        Empty 204 response.
    """
    await service.update_product(product_id, payload.id, to_product_data(payload))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Product not found or deleted"}},
    summary="Delete product",
    description="Soft delete a product. The record is kept but no longer returned.",
)
async def delete_product(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Soft delete a product.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        Empty 204 response.
    """
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
