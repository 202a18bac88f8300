"""Unit tests for the Product model.

Covers:
- Valid creation and timestamp bookkeeping.
- Name uniqueness (case-sensitive unique index).
- Field bounds via full_clean and DB check constraints.
- Default ordering by ascending id.
- __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from catalog.products.models import Product

pytestmark = pytest.mark.unit


def _build(**overrides) -> Product:
    defaults = {
        "name": "Test Product",
        "description": "Test Description",
        "price": Decimal("99.99"),
        "quantity": 10,
        "category": "Electronics",
    }
    defaults.update(overrides)
    return Product(**defaults)


# ---------------------------------------------------------------------------
# Creation and timestamps
# ---------------------------------------------------------------------------


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = _build()
        p.save()
        p.refresh_from_db()
        assert isinstance(p.id, int)
        assert p.name == "Test Product"
        assert p.price == Decimal("99.99")
        assert p.quantity == 10

    def test_timestamps_set_on_create(self):
        p = _build()
        p.save()
        assert p.created_at is not None
        assert p.created_at == p.updated_at

    def test_update_preserves_created_at_and_moves_updated_at(self):
        p = _build()
        p.save()
        created_at, updated_at = p.created_at, p.updated_at

        p.quantity = 3
        p.save()
        p.refresh_from_db()

        assert p.created_at == created_at
        assert p.updated_at >= updated_at
        assert p.updated_at >= p.created_at

    def test_update_fields_always_includes_updated_at(self):
        p = _build()
        p.save()
        before = p.updated_at

        p.quantity = 7
        p.save(update_fields=["quantity"])
        p.refresh_from_db()

        assert p.quantity == 7
        assert p.updated_at >= before

    def test_ids_increase_with_insertion(self):
        first = _build(name="First")
        first.save()
        second = _build(name="Second")
        second.save()
        assert second.id > first.id
        assert list(Product.objects.values_list("name", flat=True)) == [
            "First",
            "Second",
        ]

    def test_str(self):
        p = _build(name="Lamp")
        p.save()
        assert str(p) == f"{p.id} - Lamp"


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class TestNameUniqueness:
    def test_duplicate_name_rejected_by_index(self):
        _build(name="Unique Name").save()
        with pytest.raises(IntegrityError):
            _build(name="Unique Name").save()


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestProductValidation:
    def test_valid_product_passes_full_clean(self):
        _build().full_clean()

    @pytest.mark.parametrize("name", ["ab", "x" * 101, "   "])
    def test_invalid_name(self, name):
        with pytest.raises(ValidationError) as exc_info:
            _build(name=name).full_clean()
        assert "name" in exc_info.value.message_dict

    @pytest.mark.parametrize("description", ["too short", "d" * 501, " " * 12])
    def test_invalid_description(self, description):
        with pytest.raises(ValidationError) as exc_info:
            _build(description=description).full_clean()
        assert "description" in exc_info.value.message_dict

    @pytest.mark.parametrize("price", [Decimal("0.00"), Decimal("1000000.01")])
    def test_price_out_of_range(self, price):
        with pytest.raises(ValidationError) as exc_info:
            _build(price=price).full_clean()
        assert "price" in exc_info.value.message_dict

    @pytest.mark.parametrize("quantity", [-1, 10_001])
    def test_quantity_out_of_range(self, quantity):
        with pytest.raises(ValidationError) as exc_info:
            _build(quantity=quantity).full_clean()
        assert "quantity" in exc_info.value.message_dict

    def test_blank_category_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _build(category="  ").full_clean()
        assert "category" in exc_info.value.message_dict

    def test_price_check_constraint_enforced_by_database(self):
        with pytest.raises(IntegrityError):
            _build(price=Decimal("0.00")).save()

    def test_quantity_check_constraint_enforced_by_database(self):
        with pytest.raises(IntegrityError):
            _build(quantity=-1).save()
