"""Shared fixtures: a fresh SQLite database per test.

Tables are created and seeded through a synchronous engine; the code
under test talks to the same file through aiosqlite.
"""

from collections.abc import AsyncIterator, Iterator
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from app.catalog.models import Product
from app.infrastructure.database import Base, get_session
from app.main import app


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Path of the per-test SQLite database file."""
    return tmp_path / "inventory.db"


@pytest.fixture
def sync_engine(database_path: Path) -> Iterator[Engine]:
    """Synchronous engine with the schema created."""
    engine = create_engine(f"sqlite:///{database_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def async_engine(database_path: Path, sync_engine: Engine) -> Iterator[AsyncEngine]:
    """Async engine over the same database file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{database_path}",
        poolclass=NullPool,
    )
    yield engine
    engine.sync_engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured like the application's."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Async session for service and repository tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage(sync_engine: Engine) -> Iterator[Session]:
    """Direct access to stored rows, bypassing the service."""
    with Session(sync_engine) as session:
        yield session


@pytest.fixture
def seeded_products(sync_engine: Engine) -> list[Product]:
    """Seed two Electronics products and one Furniture product."""
    now = datetime.now(timezone.utc)
    products = [
        Product(
            name="Test Laptop",
            description="Test laptop description",
            price=Decimal("999.99"),
            stock_quantity=10,
            category="Electronics",
            is_active=True,
            created_at=now,
        ),
        Product(
            name="Test Phone",
            description="Test phone description",
            price=Decimal("599.99"),
            stock_quantity=15,
            category="Electronics",
            is_active=True,
            created_at=now,
        ),
        Product(
            name="Test Chair",
            description="Test chair description",
            price=Decimal("199.99"),
            stock_quantity=5,
            category="Furniture",
            is_active=True,
            created_at=now,
        ),
    ]

    with Session(sync_engine, expire_on_commit=False) as session:
        session.add_all(products)
        session.commit()

    return products


@pytest.fixture
def inactive_product(sync_engine: Engine) -> Product:
    """Seed a soft-deleted Electronics product."""
    product = Product(
        name="Retired Tablet",
        description="Discontinued tablet",
        price=Decimal("299.00"),
        stock_quantity=1,
        category="Electronics",
        is_active=False,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )

    with Session(sync_engine, expire_on_commit=False) as session:
        session.add(product)
        session.commit()

    return product


@pytest.fixture
def client(session_factory: async_sessionmaker[AsyncSession]) -> Iterator[TestClient]:
    """Create test client backed by the per-test database."""

    async def override_get_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
