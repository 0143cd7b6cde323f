"""
Video operations exposed next to the folder core.

Only what folder permissions guard or folder listings read: deactivating
a video and tracking each user's viewing progress.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from ..database import transaction
from ..exceptions import ResourceNotFoundError
from ..models.video import Video, VideoView
from . import video_store

logger = logging.getLogger(__name__)


def get_active_video(db: Session, video_id: uuid.UUID) -> Video:
    video = video_store.find_by_id(db, video_id, active_only=True)
    if video is None:
        raise ResourceNotFoundError("Video", video_id)
    return video


def deactivate_video(db: Session, video_id: uuid.UUID) -> None:
    video = get_active_video(db, video_id)
    with transaction(db):
        video_store.deactivate(db, video)
    logger.info("Deactivated video %s", video_id)


def record_view(
    db: Session,
    video_id: uuid.UUID,
    user_id: uuid.UUID,
    watch_duration_seconds: int = 0,
    completed: bool = False,
) -> VideoView:
    get_active_video(db, video_id)
    with transaction(db):
        view = video_store.mark_viewed(db, video_id, user_id, watch_duration_seconds, completed)
    db.refresh(view)
    return view


def get_video_view(db: Session, video_id: uuid.UUID, user_id: uuid.UUID) -> Optional[VideoView]:
    """The user's view record for a video, or None if they have not watched it."""
    return video_store.find_view(db, video_id, user_id)


def remove_video_view(db: Session, video_id: uuid.UUID, user_id: uuid.UUID) -> None:
    """Un-mark a video as watched. Raises ResourceNotFoundError if there is no record."""
    view = video_store.find_view(db, video_id, user_id)
    if view is None:
        raise ResourceNotFoundError("VideoView", video_id)
    with transaction(db):
        video_store.remove_view(db, view)
    logger.info("User %s cleared view of video %s", user_id, video_id)


def get_total_views(db: Session, video_id: uuid.UUID) -> int:
    return video_store.count_views(db, video_id)
