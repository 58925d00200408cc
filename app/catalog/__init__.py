"""Product Catalog Service.

Provides listing, searching, and CRUD operations over inventory
products with soft deletion.
"""

from app.catalog.models import Product
from app.catalog.repository import ProductRepository
from app.catalog.service import (
    CatalogService,
    PaginatedResult,
    PaginationParams,
    ProductData,
    ProductFilter,
)
from app.catalog.sorting import SortKey

__all__ = [
    # Models
    "Product",
    # Repository
    "ProductRepository",
    # Sorting
    "SortKey",
    # Service
    "CatalogService",
    "PaginatedResult",
    "PaginationParams",
    "ProductData",
    "ProductFilter",
]
