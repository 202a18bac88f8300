"""Cross-cutting exceptions shared by the persistence and HTTP layers."""

from __future__ import annotations


class UniquenessConflict(Exception):
    """A write was rejected by a unique index in storage.

    ``field`` names the column whose uniqueness was violated.
    """

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Duplicate value for '{field}': {value!r}")
        self.field = field
        self.value = value


class ConstraintViolation(Exception):
    """A path or query parameter is well-formed but outside its declared bounds."""

    def __init__(self, parameter: str, detail: str) -> None:
        super().__init__(f"{parameter}: {detail}")
        self.parameter = parameter
        self.detail = detail
