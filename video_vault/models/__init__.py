"""
Models package for Video Vault.

Exports all SQLAlchemy models for database operations.
"""

from .soft_delete import Active, Deleted, RecordState, SoftDeleteMixin
from .user import User, UserRole
from .folder import Folder
from .folder_permission import FolderPermission, PermissionType
from .video import Video, VideoView

__all__ = [
    "Active",
    "Deleted",
    "RecordState",
    "SoftDeleteMixin",
    "User",
    "UserRole",
    "Folder",
    "FolderPermission",
    "PermissionType",
    "Video",
    "VideoView",
]
