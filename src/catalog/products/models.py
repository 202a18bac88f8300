"""Product model with name uniqueness and stock control.

Rules enforced at storage level:
- ``name`` is unique (UNIQUE INDEX, case-sensitive compare).
- ``price`` lies in [0.01, 1,000,000.00] (CHECK constraint).
- ``quantity`` lies in [0, 10,000] (CHECK constraint).

``full_clean()`` applies the same bounds plus the length and non-blank
rules on text fields.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.db import models

from catalog.core.models import BaseModel
from catalog.products.constants import (
    CATEGORY_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
    QUANTITY_MAX,
    QUANTITY_MIN,
)


class Product(BaseModel):
    """Product aggregate root."""

    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        unique=True,
        validators=[MinLengthValidator(NAME_MIN_LENGTH)],
    )
    description = models.CharField(
        max_length=DESCRIPTION_MAX_LENGTH,
        validators=[MinLengthValidator(DESCRIPTION_MIN_LENGTH)],
    )
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(PRICE_MIN), MaxValueValidator(PRICE_MAX)],
    )
    quantity = models.IntegerField(
        validators=[MinValueValidator(QUANTITY_MIN), MaxValueValidator(QUANTITY_MAX)],
    )
    category = models.CharField(max_length=CATEGORY_MAX_LENGTH)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=PRICE_MIN, price__lte=PRICE_MAX),
                name="products_price_range",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=QUANTITY_MIN, quantity__lte=QUANTITY_MAX),
                name="products_quantity_range",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        errors = {}
        for field in ("name", "description", "category"):
            value = getattr(self, field)
            if value is not None and not value.strip():
                errors[field] = f"{field.capitalize()} is mandatory"
        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
