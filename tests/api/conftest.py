"""Shared fixtures for API tests."""

from typing import Any

import pytest


@pytest.fixture
def product_payload() -> dict[str, Any]:
    """Valid create body in the API's camelCase format."""
    return {
        "name": "Test Product",
        "description": "Test description",
        "price": 299.99,
        "stockQuantity": 20,
        "category": "Test Category",
    }
