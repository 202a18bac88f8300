"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Every public method runs in exactly one database transaction
(``transaction.atomic``): it commits on normal return and rolls back on
any exception, domain or infrastructure.

Name uniqueness is pre-checked with a case-insensitive look-up, but the
unique index in storage has the final say: a ``UniquenessConflict`` from
the repository surfaces as ``ProductAlreadyExists`` as well.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List

import structlog
from django.db import transaction

from catalog.core.exceptions import UniquenessConflict
from catalog.products.dtos import ProductRequestDTO, ProductResponseDTO
from catalog.products.exceptions import ProductAlreadyExists, ProductNotFound
from catalog.products.models import Product

if TYPE_CHECKING:
    from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _to_responses(products: Iterable[Product]) -> List[ProductResponseDTO]:
    return [ProductResponseDTO.from_entity(p) for p in products]


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductRequestDTO) -> ProductResponseDTO:
        """Create a new product after enforcing name uniqueness.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)
        log.info("product.creating")

        if self._repo.get_by_name(dto.name) is not None:
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(dto.name)

        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            quantity=dto.quantity,
            category=dto.category,
        )
        try:
            product = self._repo.insert(product)
        except UniquenessConflict as exc:
            log.warning("product.duplicate_name", source="unique_index")
            raise ProductAlreadyExists(dto.name) from exc

        log.info("product.created", product_id=product.id)
        return ProductResponseDTO.from_entity(product)

    @transaction.atomic
    def update_product(self, id: int, dto: ProductRequestDTO) -> ProductResponseDTO:
        """Overwrite every mutable field of an existing product.

        ``id`` and ``created_at`` are preserved; ``updated_at`` moves to now.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if another product already uses the new name.
        """
        log = logger.bind(product_id=id)
        log.info("product.updating")

        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(id)

        if dto.name != product.name:
            holder = self._repo.get_by_name(dto.name)
            if holder is not None and holder.pk != product.pk:
                log.warning("product.duplicate_name", name=dto.name)
                raise ProductAlreadyExists(dto.name)

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.quantity = dto.quantity
        product.category = dto.category

        try:
            product = self._repo.update(product)
        except UniquenessConflict as exc:
            log.warning("product.duplicate_name", name=dto.name, source="unique_index")
            raise ProductAlreadyExists(dto.name) from exc

        log.info("product.updated")
        return ProductResponseDTO.from_entity(product)

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Permanently delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.exists_by_id(id):
            raise ProductNotFound(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @transaction.atomic
    def get_product_by_id(self, id: int) -> ProductResponseDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        logger.debug("product.fetching", product_id=id)
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return ProductResponseDTO.from_entity(product)

    @transaction.atomic
    def get_all_products(self) -> List[ProductResponseDTO]:
        logger.debug("product.fetching_all")
        return _to_responses(self._repo.list())

    @transaction.atomic
    def get_products_by_category(self, category: str) -> List[ProductResponseDTO]:
        logger.debug("product.fetching_by_category", category=category)
        return _to_responses(self._repo.list_by_category(category))

    @transaction.atomic
    def get_products_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[ProductResponseDTO]:
        logger.debug(
            "product.fetching_by_price_range",
            min_price=str(min_price),
            max_price=str(max_price),
        )
        return _to_responses(self._repo.list_by_price_between(min_price, max_price))

    @transaction.atomic
    def get_low_stock_products(self, threshold: int) -> List[ProductResponseDTO]:
        """Products whose quantity is strictly below ``threshold``."""
        logger.debug("product.fetching_low_stock", threshold=threshold)
        return _to_responses(self._repo.list_low_stock(threshold))

    @transaction.atomic
    def search_products(self, keyword: str) -> List[ProductResponseDTO]:
        logger.debug("product.searching", keyword=keyword)
        return _to_responses(self._repo.search_by_keyword(keyword))
