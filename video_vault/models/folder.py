"""
Folder model for organizing videos.

Folders form a forest through a self-referencing parent pointer.
Folders are never physically removed; deletion is a soft delete.
"""

import uuid
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base
from .soft_delete import SoftDeleteMixin

if TYPE_CHECKING:
    from .user import User
    from .video import Video


class Folder(SoftDeleteMixin, Base):
    """
    SQLAlchemy model for folders.

    Attributes:
        id: Unique identifier for the folder
        parent_folder_id: Optional reference to parent folder (None for a root folder)
        name: Human-readable name for the folder
        description: Optional free-text description
        display_order: Optional position among siblings; None sorts last
        created_by_user_id: User who created the folder
        created_at: Timestamp when the folder was created
        updated_at: Timestamp when the folder was last updated
        deleted_at: Soft-delete timestamp, see ``SoftDeleteMixin``
    """
    __tablename__ = "folders"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    parent_folder_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        ForeignKey("folders.id"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    display_order: Mapped[Optional[int]] = mapped_column(nullable=True)
    created_by_user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    created_by_user: Mapped["User"] = relationship("User", back_populates="folders")
    videos: Mapped[List["Video"]] = relationship("Video", back_populates="folder")
