"""Tests for the product repository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import MAX_PRODUCT_ID, Product
from app.catalog.repository import ProductRepository
from app.catalog.sorting import SortKey


class TestLookups:
    """Tests for single-product lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_includes_inactive(
        self, session: AsyncSession, inactive_product: Product
    ) -> None:
        """get_by_id ignores the active flag."""
        repo = ProductRepository(session)

        product = await repo.get_by_id(inactive_product.id)

        assert product is not None
        assert product.is_active is False

    @pytest.mark.asyncio
    async def test_get_active_excludes_inactive(
        self, session: AsyncSession, inactive_product: Product
    ) -> None:
        repo = ProductRepository(session)
        assert await repo.get_active(inactive_product.id) is None

    @pytest.mark.asyncio
    async def test_exists_active(
        self,
        session: AsyncSession,
        seeded_products: list[Product],
        inactive_product: Product,
    ) -> None:
        repo = ProductRepository(session)

        assert await repo.exists_active(seeded_products[0].id) is True
        assert await repo.exists_active(inactive_product.id) is False
        assert await repo.exists_active(99999) is False

    @pytest.mark.asyncio
    async def test_ids_outside_column_range_are_missing(
        self, session: AsyncSession, seeded_products: list[Product]
    ) -> None:
        """Lookups never send an unstorable id to the database."""
        repo = ProductRepository(session)

        for product_id in (0, -5, MAX_PRODUCT_ID + 1, 10**20):
            assert await repo.get_by_id(product_id) is None
            assert await repo.get_active(product_id) is None
            assert await repo.exists_active(product_id) is False


class TestFindAll:
    """Tests for find_all and count."""

    @pytest.mark.asyncio
    async def test_store_order_without_sort_key(
        self,
        session: AsyncSession,
        seeded_products: list[Product],
        inactive_product: Product,
    ) -> None:
        """Without a sort key results come back by ascending id."""
        repo = ProductRepository(session)

        products = await repo.find_all()

        assert [p.id for p in products] == [p.id for p in seeded_products]

    @pytest.mark.asyncio
    async def test_category_filter_is_exact(
        self, session: AsyncSession, seeded_products: list[Product]
    ) -> None:
        repo = ProductRepository(session)

        assert await repo.count(category="Electronics") == 2
        assert await repo.count(category="Electro") == 0

    @pytest.mark.asyncio
    async def test_empty_category_means_no_filter(
        self, session: AsyncSession, seeded_products: list[Product]
    ) -> None:
        repo = ProductRepository(session)
        assert await repo.count(category="") == 3

    @pytest.mark.asyncio
    async def test_search_matches_name_or_description(
        self, session: AsyncSession, seeded_products: list[Product]
    ) -> None:
        repo = ProductRepository(session)

        by_name = await repo.find_all(search="PHONE")
        by_description = await repo.find_all(search="chair desc")

        assert [p.name for p in by_name] == ["Test Phone"]
        assert [p.name for p in by_description] == ["Test Chair"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(
        self, session: AsyncSession, seeded_products: list[Product]
    ) -> None:
        repo = ProductRepository(session)

        assert await repo.count(search="%") == 0
        assert await repo.count(search="Test_") == 0

    @pytest.mark.asyncio
    async def test_sort_and_window(
        self, session: AsyncSession, seeded_products: list[Product]
    ) -> None:
        repo = ProductRepository(session)

        products = await repo.find_all(
            sort_key=SortKey.PRICE_ASC,
            limit=2,
            offset=1,
        )

        assert [p.name for p in products] == ["Test Phone", "Test Laptop"]
