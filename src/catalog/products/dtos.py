"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductRequestDTO``: input for product creation and full update.
- ``ProductResponseDTO``: output with all product fields.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

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

if TYPE_CHECKING:
    from catalog.products.models import Product


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductRequestDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Validates:
    - ``name``: 3-100 characters, not blank.
    - ``description``: 10-500 characters, not blank.
    - ``price``: 0.01 to 1,000,000.00 with at most two fractional digits.
    - ``quantity``: 0 to 10,000.
    - ``category``: not blank.

    Text is kept verbatim; surrounding whitespace is not stripped.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH
    )
    price: Decimal = Field(
        ge=PRICE_MIN,
        le=PRICE_MAX,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    quantity: int = Field(ge=QUANTITY_MIN, le=QUANTITY_MAX)
    category: str = Field(min_length=1, max_length=CATEGORY_MAX_LENGTH)

    @field_validator("name", "description", "category")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductResponseDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    price: Decimal
    quantity: int
    category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponseDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            category=product.category,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
