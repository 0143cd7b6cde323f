"""
Pydantic schemas for folders.

Defines schemas for creating, updating, and returning folder data,
including folder listings with content flags and viewed state.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FolderBase(BaseModel):
    """Base schema with common folder fields."""
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    display_order: int | None = None


class FolderCreate(FolderBase):
    """Schema for creating a new folder."""
    parent_folder_id: uuid.UUID | None = None
    editor_to_add_ids: list[uuid.UUID] = []


class FolderUpdate(BaseModel):
    """
    Schema for updating an existing folder. All fields are optional.

    Only fields present in the payload are applied; an explicit null
    description or display order clears it. Folders cannot be moved, so a
    parent id in the payload is ignored.
    """
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    display_order: int | None = None
    editor_to_add_ids: list[uuid.UUID] = []
    editor_to_remove_ids: list[uuid.UUID] = []


class FolderResponse(BaseModel):
    """Schema for folder response with all fields."""
    id: uuid.UUID
    name: str
    description: str | None
    parent_folder_id: uuid.UUID | None
    display_order: int | None
    created_by_user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FolderSummary(FolderResponse):
    """Folder in a listing, flagged when it directly holds videos or sub-folders."""
    has_content: bool


class VideoSummary(BaseModel):
    """Video in a folder listing."""
    id: uuid.UUID
    folder_id: uuid.UUID | None
    title: str
    description: str | None
    thumbnail_key: str | None
    duration_seconds: int | None
    display_order: int | None
    viewed: bool = False

    model_config = ConfigDict(from_attributes=True)


class FolderContents(BaseModel):
    """Direct contents of a folder."""
    videos: list[VideoSummary] = []
    child_folders: list[FolderSummary] = []


class FolderWithContents(FolderResponse, FolderContents):
    """Folder detail including its direct videos and child folders."""
    pass


class PermissionCheckResponse(BaseModel):
    has_permission: bool
