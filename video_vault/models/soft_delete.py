"""
Soft-delete support shared by folders and folder permissions.

A row is either ``Active`` or ``Deleted(at)``. The state is backed by a
nullable ``deleted_at`` column, but callers read it through ``state`` and
filter queries through ``not_deleted()`` instead of touching the column.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from sqlalchemy.orm import Mapped, mapped_column


@dataclass(frozen=True)
class Active:
    """Row is live and visible to every read path."""


@dataclass(frozen=True)
class Deleted:
    """Row was soft-deleted at ``at``; kept for history only."""
    at: datetime


RecordState = Union[Active, Deleted]


class SoftDeleteMixin:
    """Adds a ``deleted_at`` column and tagged-state helpers to a model."""

    deleted_at: Mapped[Optional[datetime]] = mapped_column(default=None, nullable=True)

    @property
    def state(self) -> RecordState:
        if self.deleted_at is None:
            return Active()
        return Deleted(at=self.deleted_at)

    @property
    def is_deleted(self) -> bool:
        return isinstance(self.state, Deleted)

    def soft_delete(self, at: Optional[datetime] = None) -> None:
        """Move the row to the ``Deleted`` state. Already deleted rows keep their timestamp."""
        if self.deleted_at is None:
            self.deleted_at = at or datetime.utcnow()

    @classmethod
    def not_deleted(cls):
        """SQL criterion selecting only ``Active`` rows."""
        return cls.deleted_at.is_(None)
