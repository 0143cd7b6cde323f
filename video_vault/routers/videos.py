"""
Video API routes used alongside folders.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_caller, require_folder_editor
from ..schemas.video import TotalViewsResponse, VideoViewCreate, VideoViewResponse
from ..services.caller import CallerContext
from ..services.video_service import (
    deactivate_video,
    get_active_video,
    get_total_views,
    get_video_view,
    record_view,
    remove_video_view,
)


router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.post("/{video_id}/views", response_model=VideoViewResponse)
def mark_viewed(
    video_id: uuid.UUID,
    view_data: VideoViewCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """Record the caller's viewing progress for a video."""
    return record_view(
        db,
        video_id,
        caller.user_id,
        watch_duration_seconds=view_data.watch_duration_seconds,
        completed=view_data.completed,
    )


@router.get("/{video_id}/views", response_model=Optional[VideoViewResponse])
def read_view(
    video_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """The caller's view record, or null when they have not watched the video."""
    return get_video_view(db, video_id, caller.user_id)


@router.delete("/{video_id}/views", status_code=status.HTTP_204_NO_CONTENT)
def unmark_viewed(
    video_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    remove_video_view(db, video_id, caller.user_id)
    return None


@router.get("/{video_id}/total-views", response_model=TotalViewsResponse)
def read_total_views(
    video_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    return {"total_views": get_total_views(db, video_id)}


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    video_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """Deactivate a video. Requires editor rights on the video's folder."""
    video = get_active_video(db, video_id)
    require_folder_editor(db, caller, video.folder_id)
    deactivate_video(db, video_id)
    return None
