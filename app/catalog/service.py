"""Catalog service for product operations.

High-level service that combines repository operations with the
inventory rules: soft deletion, timestamp stamping, pagination
metadata, and optimistic concurrency handling.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Generic, TypeVar

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.catalog.models import Product
from app.catalog.repository import ProductRepository
from app.catalog.sorting import SortKey
from app.domain.exceptions import ProductIdMismatchError, ProductNotFoundError

T = TypeVar("T")

logger = structlog.get_logger()


@dataclass
class ProductFilter:
    """Filter parameters for product queries.

    Attributes:
        category: Exact category match; empty means no filter.
        search: Substring searched in name and description.
    """

    category: str | None = None
    search: str | None = None


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        page_size: Items per page.
        sort_key: Ordering; None keeps store order.
    """

    page: int = 1
    page_size: int = 10
    sort_key: SortKey | None = SortKey.NAME

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: List of items.
        total: Total count.
        page: Current page.
        page_size: Items per page.
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return math.ceil(self.total / self.page_size)


@dataclass
class ProductData:
    """Client-editable product fields."""

    name: str
    price: Decimal
    stock_quantity: int
    category: str
    description: str | None = None


class CatalogService:
    """Service for catalog operations.

    One instance per request; holds no state beyond its session.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            page = await service.list_products(
                ProductFilter(category="Electronics"),
                PaginationParams(page=1, sort_key=SortKey.PRICE_ASC),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.repository = ProductRepository(session)

    async def list_products(
        self,
        filters: ProductFilter,
        pagination: PaginationParams,
    ) -> PaginatedResult[Product]:
        """List active products with filters, sorting and pagination.

        Args:
            filters: Filter parameters.
            pagination: Pagination parameters.

        Returns:
            Paginated product results.
        """
        total = await self.repository.count(
            category=filters.category,
            search=filters.search,
        )

        products = await self.repository.find_all(
            category=filters.category,
            search=filters.search,
            sort_key=pagination.sort_key,
            limit=pagination.limit,
            offset=pagination.offset,
        )

        return PaginatedResult(
            items=list(products),
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
        )

    async def search_products(
        self,
        query: str,
        page: int = 1,
        page_size: int = 10,
    ) -> PaginatedResult[Product]:
        """Search active products by name or description.

        Results are returned in store order.

        Args:
            query: Text to look for.
            page: Page number (1-indexed).
            page_size: Items per page.

        Returns:
            Paginated product results.
        """
        return await self.list_products(
            ProductFilter(search=query),
            PaginationParams(page=page, page_size=page_size, sort_key=None),
        )

    async def get_product(self, product_id: int) -> Product | None:
        """Get an active product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found and active.
        """
        return await self.repository.get_active(product_id)

    async def create_product(self, data: ProductData) -> Product:
        """Create a product.

        The store assigns the id; creation time and the active flag are
        always set here.

        Args:
            data: Product fields.

        Returns:
            Created product.
        """
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            stock_quantity=data.stock_quantity,
            category=data.category,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )

        await self.repository.save(product)
        await self.session.commit()

        logger.info(
            "Product created",
            product_id=product.id,
            category=product.category,
        )
        return product

    async def update_product(
        self,
        product_id: int,
        payload_id: int,
        data: ProductData,
    ) -> Product:
        """Overwrite the editable fields of an active product.

        Args:
            product_id: ID from the request path.
            payload_id: ID carried in the request body.
            data: New product fields.

        Returns:
            Updated product.

        Raises:
            ProductIdMismatchError: If the two IDs differ.
            ProductNotFoundError: If no active product exists, including
                when it disappeared during a concurrent write.
            StaleDataError: If a concurrent write changed a product that
                is still active.
        """
        if product_id != payload_id:
            raise ProductIdMismatchError(product_id, payload_id)

        product = await self._get_active_or_raise(product_id)

        product.name = data.name
        product.description = data.description
        product.price = data.price
        product.stock_quantity = data.stock_quantity
        product.category = data.category
        product.updated_at = datetime.now(timezone.utc)

        try:
            await self.session.commit()
        except StaleDataError:
            await self.session.rollback()
            if not await self.repository.exists_active(product_id):
                logger.info(
                    "Product removed during concurrent update",
                    product_id=product_id,
                )
                raise ProductNotFoundError(product_id) from None
            logger.error("Concurrent update conflict", product_id=product_id)
            raise

        logger.info("Product updated", product_id=product_id)
        return product

    async def delete_product(self, product_id: int) -> None:
        """Soft delete an active product.

        The row stays in storage with ``is_active`` set to False.

        Args:
            product_id: Product ID.

        Raises:
            ProductNotFoundError: If no active product exists.
        """
        product = await self._get_active_or_raise(product_id)

        product.is_active = False
        product.updated_at = datetime.now(timezone.utc)
        await self.session.commit()

        logger.info("Product soft deleted", product_id=product_id)

    async def _get_active_or_raise(self, product_id: int) -> Product:
        product = await self.repository.get_active(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
