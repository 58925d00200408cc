"""Sort keys for product listings.

Each supported sort key maps to a fixed ORDER BY clause. Unknown or missing
keys fall back to ordering by name.
"""

from enum import Enum
from typing import Any

from app.catalog.models import Product


class SortKey(str, Enum):
    """Supported product orderings."""

    NAME = "name"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortKey":
        """Resolve a client-supplied sort key.

        Matching is case-insensitive. Absent or unrecognized values
        resolve to NAME.

        Args:
            value: Raw sort key from the request.

        Returns:
            The matching sort key.
        """
        if not value:
            return cls.NAME
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NAME


# id is the tie-breaker so pages stay stable across requests
ORDERINGS: dict[SortKey, tuple[Any, ...]] = {
    SortKey.NAME: (Product.name.asc(), Product.id.asc()),
    SortKey.PRICE_ASC: (Product.price.asc(), Product.id.asc()),
    SortKey.PRICE_DESC: (Product.price.desc(), Product.id.asc()),
}


def order_by_clauses(sort_key: SortKey) -> tuple[Any, ...]:
    """Get ORDER BY clauses for a sort key.

    Args:
        sort_key: Sort key.

    Returns:
        SQLAlchemy ordering expressions.
    """
    return ORDERINGS[sort_key]
