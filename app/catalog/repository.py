"""Product repository for database operations.

Provides queries over active products with filtering, searching,
sorting, and pagination.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import MAX_PRODUCT_ID, Product
from app.catalog.sorting import SortKey, order_by_clauses


class ProductRepository:
    """Repository for Product database operations.

    Every read except ``get_by_id`` is restricted to active products.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(
                category="Electronics",
                sort_key=SortKey.PRICE_ASC,
                limit=10,
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Flushes so the store-generated id is populated.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID regardless of its active flag.

        Args:
            product_id: Product ID.

        Returns:
            Product if the row exists, None otherwise.
        """
        if not storable_id(product_id):
            return None
        return await self.session.get(Product, product_id)

    async def get_active(self, product_id: int) -> Product | None:
        """Get an active product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found and active, None otherwise.
        """
        if not storable_id(product_id):
            return None
        query = select(Product).where(
            and_(
                Product.id == product_id,
                Product.is_active.is_(True),
            )
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def exists_active(self, product_id: int) -> bool:
        """Check whether an active product with this ID exists.

        Args:
            product_id: Product ID.

        Returns:
            True if an active row exists.
        """
        if not storable_id(product_id):
            return False
        query = select(func.count(Product.id)).where(
            and_(
                Product.id == product_id,
                Product.is_active.is_(True),
            )
        )
        result = await self.session.execute(query)
        return result.scalar_one() > 0

    async def find_all(
        self,
        category: str | None = None,
        search: str | None = None,
        sort_key: SortKey | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[Product]:
        """Find active products with filtering, sorting, and pagination.

        Args:
            category: Filter by exact category.
            search: Case-insensitive substring match on name or description.
            sort_key: Ordering; None keeps store order (ascending id).
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of matching products.
        """
        query = select(Product).where(and_(*self._conditions(category, search)))

        if sort_key is None:
            query = query.order_by(Product.id.asc())
        else:
            query = query.order_by(*order_by_clauses(sort_key))

        query = query.limit(limit).offset(offset)

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(
        self,
        category: str | None = None,
        search: str | None = None,
    ) -> int:
        """Count active products matching filters.

        Args:
            category: Filter by exact category.
            search: Case-insensitive substring match on name or description.

        Returns:
            Count of matching products.
        """
        query = select(func.count(Product.id)).where(
            and_(*self._conditions(category, search))
        )
        result = await self.session.execute(query)
        return result.scalar_one()

    def _conditions(self, category: str | None, search: str | None) -> list[Any]:
        """Build WHERE conditions shared by find_all and count."""
        conditions: list[Any] = [Product.is_active.is_(True)]

        if category:
            conditions.append(Product.category == category)

        if search:
            conditions.append(
                or_(
                    Product.name.icontains(search, autoescape=True),
                    Product.description.icontains(search, autoescape=True),
                )
            )

        return conditions


def storable_id(product_id: int) -> bool:
    """Check whether an ID fits the id column.

    IDs outside the column's range cannot match any row, and binding them
    makes the driver fail, so lookups treat them as missing.
    """
    return 0 < product_id <= MAX_PRODUCT_ID
