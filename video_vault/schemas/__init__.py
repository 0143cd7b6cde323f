"""
Pydantic schemas package.

Exports all schemas for API request/response validation.
"""

from .folder import (
    FolderBase,
    FolderCreate,
    FolderUpdate,
    FolderResponse,
    FolderSummary,
    VideoSummary,
    FolderContents,
    FolderWithContents,
    PermissionCheckResponse,
)

from .user import UserResponse

from .video import (
    VideoViewCreate,
    VideoViewResponse,
    TotalViewsResponse,
)

__all__ = [
    # Folder schemas
    "FolderBase",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "FolderSummary",
    "VideoSummary",
    "FolderContents",
    "FolderWithContents",
    "PermissionCheckResponse",
    # User schemas
    "UserResponse",
    # Video schemas
    "VideoViewCreate",
    "VideoViewResponse",
    "TotalViewsResponse",
]
