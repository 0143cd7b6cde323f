"""
Folder permission model.

A permission row grants one user a role on one folder. Editor grants are
inherited by every descendant folder; viewer grants are recorded but not
consulted by any authorization check.
"""

import enum
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base
from .soft_delete import SoftDeleteMixin

if TYPE_CHECKING:
    from .user import User


class PermissionType(str, enum.Enum):
    EDITOR = "editor"
    VIEWER = "viewer"


class FolderPermission(SoftDeleteMixin, Base):
    """
    SQLAlchemy model for folder-scoped grants.

    Rows are not deduplicated: granting twice yields two active rows.

    Attributes:
        id: Unique identifier for the grant
        folder_id: Folder the grant is scoped to
        user_id: Grantee
        permission_type: ``editor`` or ``viewer``
        granted_by_user_id: User who created the grant
        created_at: Timestamp when the grant was created
        updated_at: Timestamp when the grant was last updated
        deleted_at: Revocation timestamp, see ``SoftDeleteMixin``
    """
    __tablename__ = "folder_permissions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    folder_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("folders.id"), index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    permission_type: Mapped[PermissionType] = mapped_column(
        Enum(PermissionType, values_callable=lambda e: [m.value for m in e], native_enum=False),
    )
    granted_by_user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    user: Mapped["User"] = relationship("User", foreign_keys=[user_id])
    granted_by_user: Mapped["User"] = relationship("User", foreign_keys=[granted_by_user_id])
