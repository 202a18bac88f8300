"""Base abstract model shared by the catalogue entities.

Provides ``BaseModel``: 64-bit auto-increment primary key plus
``created_at`` / ``updated_at`` bookkeeping.

- Both timestamps are taken from a single clock read on insert, so a
  fresh row always has ``created_at == updated_at``.
- ``created_at`` is never written again after the first insert.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with BigAutoField PK and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField(editable=False)

    class Meta:
        abstract = True

    def touch(self) -> None:
        """Stamp ``updated_at`` (and ``created_at`` for unsaved rows)."""
        now = timezone.now()
        if self._state.adding or self.created_at is None:
            self.created_at = now
        # Never move backwards, even if the wall clock does.
        if self.updated_at is None or now > self.updated_at:
            self.updated_at = now

    def save(self, *args, **kwargs) -> None:
        """Refresh timestamps, keeping ``updated_at`` in ``update_fields``."""
        self.touch()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
