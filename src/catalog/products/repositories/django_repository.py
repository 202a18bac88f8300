"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain error.

Writes run inside a savepoint so that a unique-index violation can be
turned into ``UniquenessConflict`` while leaving the caller's transaction
usable.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from django.db import IntegrityError, transaction
from django.db.models import Q

from catalog.core.exceptions import UniquenessConflict
from catalog.products.models import Product
from catalog.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(pk=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    def exists_by_id(self, id: int) -> bool:
        return Product.objects.filter(pk=id).exists()

    def insert(self, entity: Product) -> Product:
        """Insert a new product; both timestamps are set to now."""
        self._write(entity, force_insert=True)
        return entity

    def update(self, entity: Product) -> Product:
        """Update an existing product; ``created_at`` is left untouched."""
        self._write(entity, force_update=True)
        return entity

    def delete(self, id: int) -> None:
        Product.objects.filter(pk=id).delete()

    def get_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name__iexact=name).first()

    def list_by_category(self, category: str) -> List[Product]:
        return list(Product.objects.filter(category__iexact=category).order_by("id"))

    def list_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        return list(
            Product.objects.filter(price__gte=min_price, price__lte=max_price).order_by(
                "id"
            )
        )

    def list_low_stock(self, threshold: int) -> List[Product]:
        return list(Product.objects.filter(quantity__lt=threshold).order_by("id"))

    def search_by_keyword(self, keyword: str) -> List[Product]:
        return list(
            Product.objects.filter(
                Q(name__icontains=keyword) | Q(description__icontains=keyword)
            ).order_by("id")
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(self, entity: Product, **save_kwargs) -> None:
        entity.full_clean(validate_unique=False, validate_constraints=False)
        try:
            with transaction.atomic():
                entity.save(**save_kwargs)
        except IntegrityError as exc:
            if self._name_taken(entity):
                raise UniquenessConflict("name", entity.name) from exc
            raise

    @staticmethod
    def _name_taken(entity: Product) -> bool:
        others = Product.objects.filter(name=entity.name)
        if entity.pk is not None:
            others = others.exclude(pk=entity.pk)
        return others.exists()
