"""Product DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views): they perform
the structural validation of payloads and query strings before any
service call.  Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from catalog.products.constants import (
    CATEGORY_MAX_LENGTH,
    DEFAULT_LOW_STOCK_THRESHOLD,
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
from catalog.products.dtos import ProductRequestDTO


def not_blank(value: str) -> None:
    if not value.strip():
        raise serializers.ValidationError("This field may not be blank.")


class ProductRequestSerializer(serializers.Serializer):
    """Validates the ``{name, description, price, quantity, category}`` payload.

    Unknown keys are ignored.  Text is not trimmed.
    """

    name = serializers.CharField(
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        trim_whitespace=False,
        validators=[not_blank],
    )
    description = serializers.CharField(
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        trim_whitespace=False,
        validators=[not_blank],
    )
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        min_value=PRICE_MIN,
        max_value=PRICE_MAX,
    )
    quantity = serializers.IntegerField(min_value=QUANTITY_MIN, max_value=QUANTITY_MAX)
    category = serializers.CharField(
        max_length=CATEGORY_MAX_LENGTH,
        trim_whitespace=False,
        validators=[not_blank],
    )

    def to_dto(self) -> ProductRequestDTO:
        return ProductRequestDTO(**self.validated_data)


class ProductResponseSerializer(serializers.Serializer):
    """Renders a ``ProductResponseDTO``; ``price`` goes out as a JSON number."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        coerce_to_string=False,
    )
    quantity = serializers.IntegerField()
    category = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


# ---------------------------------------------------------------------------
# Query string serializers
# ---------------------------------------------------------------------------


class LowStockQuerySerializer(serializers.Serializer):
    threshold = serializers.IntegerField(
        required=False, default=DEFAULT_LOW_STOCK_THRESHOLD
    )


class SearchQuerySerializer(serializers.Serializer):
    keyword = serializers.CharField(allow_blank=True, trim_whitespace=False)


class PriceRangeQuerySerializer(serializers.Serializer):
    min_price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    max_price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
