"""SQLAlchemy models for the product catalog.

Defines the Product table for persistent storage.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database import Base

# Upper bound of the INTEGER id column on every supported store
MAX_PRODUCT_ID = 2**31 - 1


class Product(Base):
    """Product entity in the inventory.

    Products are never physically removed; deleting one flips ``is_active``
    to False and every read path filters on it.

    Attributes:
        id: Store-generated integer identifier.
        name: Product name.
        description: Optional product description.
        price: Unit price.
        stock_quantity: Units in stock.
        category: Category name (matched exactly when filtering).
        is_active: False once the product has been soft-deleted.
        created_at: Creation timestamp (UTC), never changed afterwards.
        updated_at: Last update or soft-delete timestamp (UTC).
        row_version: Optimistic concurrency token.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    row_version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": row_version}

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]}, active={self.is_active})>"
