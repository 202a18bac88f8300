"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the product service
depends on: name uniqueness checks and the catalogue queries.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from catalog.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from catalog.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    ``insert`` and ``update`` raise ``UniquenessConflict`` when another row
    already holds the same ``name``.  Every list-returning query is ordered
    by ascending id.
    """

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by name (case-insensitive)."""

    @abstractmethod
    def list_by_category(self, category: str) -> List[Product]:
        """Products whose category equals ``category`` (case-insensitive)."""

    @abstractmethod
    def list_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Products with ``min_price <= price <= max_price``."""

    @abstractmethod
    def list_low_stock(self, threshold: int) -> List[Product]:
        """Products with ``quantity < threshold``."""

    @abstractmethod
    def search_by_keyword(self, keyword: str) -> List[Product]:
        """Products whose name or description contains ``keyword``, ignoring case."""
