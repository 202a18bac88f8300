"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
``catalog.core.exception_handler`` translates them into HTTP responses;
the views never catch them.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """A product with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Product with name '{name}' already exists")
        self.name = name


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, id: int) -> None:
        super().__init__(f"Product not found with id: {id}")
        self.id = id
