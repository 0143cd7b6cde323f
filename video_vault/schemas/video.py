"""Pydantic schemas for video view tracking."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VideoViewCreate(BaseModel):
    """Schema for recording viewing progress."""
    watch_duration_seconds: int = Field(default=0, ge=0)
    completed: bool = False


class VideoViewResponse(BaseModel):
    id: uuid.UUID
    video_id: uuid.UUID
    user_id: uuid.UUID
    viewed_at: datetime
    watch_duration_seconds: int
    completed: bool

    model_config = ConfigDict(from_attributes=True)


class TotalViewsResponse(BaseModel):
    total_views: int
