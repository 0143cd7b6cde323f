"""
Video persistence as seen by the folder core.

Only the queries and updates folder listing and cascade delete need,
plus per-user view tracking used to annotate listings.
"""

import uuid
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models.video import Video, VideoView
from .folder_store import display_order_key


def find_by_id(db: Session, video_id: uuid.UUID, active_only: bool = True) -> Optional[Video]:
    stmt = select(Video).where(Video.id == video_id)
    if active_only:
        stmt = stmt.where(Video.is_active.is_(True))
    return db.scalars(stmt).first()


def find_by_folder_id(db: Session, folder_id: uuid.UUID, active_only: bool = True) -> list[Video]:
    stmt = select(Video).where(Video.folder_id == folder_id)
    if active_only:
        stmt = stmt.where(Video.is_active.is_(True))
    stmt = stmt.order_by(*display_order_key(Video.display_order), Video.created_at, Video.id)
    return list(db.scalars(stmt))


def count_active(db: Session, folder_id: uuid.UUID) -> int:
    return db.scalar(
        select(func.count())
        .select_from(Video)
        .where(Video.folder_id == folder_id, Video.is_active.is_(True))
    )


def update(db: Session, video: Video, **fields) -> Video:
    for field, value in fields.items():
        setattr(video, field, value)
    db.flush()
    return video


def detach(db: Session, video: Video) -> Video:
    """Clear the folder reference."""
    return update(db, video, folder_id=None)


def deactivate(db: Session, video: Video) -> Video:
    return update(db, video, is_active=False)


def viewed_video_ids(db: Session, user_id: uuid.UUID, video_ids: Iterable[uuid.UUID]) -> set[uuid.UUID]:
    """Subset of ``video_ids`` the user has a view record for."""
    video_ids = list(video_ids)
    if not video_ids:
        return set()
    rows = db.scalars(
        select(VideoView.video_id).where(
            VideoView.user_id == user_id,
            VideoView.video_id.in_(video_ids),
        )
    )
    return set(rows)


def mark_viewed(
    db: Session,
    video_id: uuid.UUID,
    user_id: uuid.UUID,
    watch_duration_seconds: int = 0,
    completed: bool = False,
) -> VideoView:
    """Create or refresh the user's view record for a video."""
    view = find_view(db, video_id, user_id)
    if view is None:
        view = VideoView(video_id=video_id, user_id=user_id)
        db.add(view)
    view.watch_duration_seconds = watch_duration_seconds
    view.completed = completed
    view.viewed_at = datetime.utcnow()
    db.flush()
    return view


def find_view(db: Session, video_id: uuid.UUID, user_id: uuid.UUID) -> Optional[VideoView]:
    return db.scalars(
        select(VideoView).where(VideoView.video_id == video_id, VideoView.user_id == user_id)
    ).first()


def remove_view(db: Session, view: VideoView) -> None:
    db.delete(view)
    db.flush()


def count_views(db: Session, video_id: uuid.UUID) -> int:
    """Number of users with a view record for the video."""
    return db.scalar(
        select(func.count())
        .select_from(VideoView)
        .where(VideoView.video_id == video_id)
    )
