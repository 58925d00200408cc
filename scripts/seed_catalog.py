#!/usr/bin/env python3
"""Seed product catalog script.

Creates the products table and seeds a sample inventory.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --force
"""

import argparse
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.catalog.service import CatalogService, PaginationParams, ProductData, ProductFilter
from app.infrastructure.database import async_session_factory, create_tables

SAMPLE_PRODUCTS = [
    ProductData(
        name="Test Laptop",
        description="Test laptop description",
        price=Decimal("999.99"),
        stock_quantity=10,
        category="Electronics",
    ),
    ProductData(
        name="Test Phone",
        description="Test phone description",
        price=Decimal("599.99"),
        stock_quantity=15,
        category="Electronics",
    ),
    ProductData(
        name="Wireless Headphones",
        description="Over-ear headphones with noise cancellation",
        price=Decimal("149.50"),
        stock_quantity=3,
        category="Electronics",
    ),
    ProductData(
        name="Test Chair",
        description="Test chair description",
        price=Decimal("199.99"),
        stock_quantity=5,
        category="Furniture",
    ),
    ProductData(
        name="Standing Desk",
        description="Height adjustable desk",
        price=Decimal("449.00"),
        stock_quantity=2,
        category="Furniture",
    ),
    ProductData(
        name="Notebook Pack",
        description="Five ruled A5 notebooks",
        price=Decimal("12.75"),
        stock_quantity=120,
        category="Office",
    ),
]


async def seed(
    session_factory: async_sessionmaker[AsyncSession] = async_session_factory,
    force: bool = False,
) -> dict[str, int]:
    """Seed the sample inventory.

    Args:
        session_factory: Factory for the session used to write products.
        force: Seed even when active products already exist.

    Returns:
        Seeding result.
    """
    async with session_factory() as session:
        service = CatalogService(session)

        existing = await service.list_products(ProductFilter(), PaginationParams(page_size=1))
        if existing.total and not force:
            return {"existing": existing.total, "created": 0}

        for data in SAMPLE_PRODUCTS:
            await service.create_product(data)

        return {"existing": existing.total, "created": len(SAMPLE_PRODUCTS)}


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the inventory with sample products",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Seed even if active products already exist",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Inventory Catalog Seeder")
    print("=" * 60)

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    result = await seed(force=args.force)

    if result["created"] == 0:
        print(f"  - Skipped: {result['existing']} active products already present (use --force)")
    else:
        print(f"  ✓ Created: {result['created']} products")

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
