"""
Video and VideoView models.

Video lifecycle (upload, transcoding, storage) is owned elsewhere; the
folder core only reads a video's folder, order and active flag, and
detaches/deactivates videos when their folder is deleted.
"""

import uuid
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import String, Text, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base

if TYPE_CHECKING:
    from .folder import Folder


class Video(Base):
    """
    SQLAlchemy model for uploaded videos.

    Attributes:
        id: Unique identifier for the video
        folder_id: Containing folder; None once detached by a folder delete
        title: Display title
        description: Optional description
        s3_key: Object-storage key of the video file
        thumbnail_key: Optional object-storage key of the thumbnail
        duration_seconds: Optional duration
        display_order: Optional position inside the folder; None sorts last
        created_by_user_id: Uploader
        is_active: False once the video has been removed
    """
    __tablename__ = "videos"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    folder_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        ForeignKey("folders.id"),
        nullable=True,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    s3_key: Mapped[str] = mapped_column(String(1024))
    thumbnail_key: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    duration_seconds: Mapped[Optional[int]] = mapped_column(nullable=True)
    display_order: Mapped[Optional[int]] = mapped_column(nullable=True)
    created_by_user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    folder: Mapped[Optional["Folder"]] = relationship("Folder", back_populates="videos")
    views: Mapped[List["VideoView"]] = relationship("VideoView", back_populates="video")


class VideoView(Base):
    """
    Per-user viewing progress for a video.

    Attributes:
        id: Unique identifier for the view record
        video_id: Viewed video
        user_id: Viewer
        viewed_at: Last time the user watched the video
        watch_duration_seconds: Seconds watched
        completed: Whether the user finished the video
    """
    __tablename__ = "video_views"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    video_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("videos.id"), index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    viewed_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, index=True)
    watch_duration_seconds: Mapped[int] = mapped_column(default=0)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)

    video: Mapped["Video"] = relationship("Video", back_populates="views")
