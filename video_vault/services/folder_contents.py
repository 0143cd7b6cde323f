"""
Folder content aggregation.

Builds the listing of a folder's direct child folders and videos. Child
folders carry a ``has_content`` flag computed with a one-level lookahead:
a folder has content when it directly holds an active video or a
non-deleted sub-folder. Deeper descendants are not inspected.
"""

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from ..exceptions import ResourceNotFoundError
from ..models.folder import Folder
from ..models.video import Video
from . import folder_store, video_store
from .permission_resolver import iter_ancestry


def has_content(db: Session, folder_id: uuid.UUID) -> bool:
    return (
        video_store.count_active(db, folder_id) > 0
        or folder_store.count_by_parent(db, folder_id) > 0
    )


def _folder_dict(folder: Folder) -> dict:
    return {
        "id": folder.id,
        "name": folder.name,
        "description": folder.description,
        "parent_folder_id": folder.parent_folder_id,
        "display_order": folder.display_order,
        "created_by_user_id": folder.created_by_user_id,
        "created_at": folder.created_at,
        "updated_at": folder.updated_at,
    }


def _folder_summary(db: Session, folder: Folder) -> dict:
    summary = _folder_dict(folder)
    summary["has_content"] = has_content(db, folder.id)
    return summary


def _video_dict(video: Video, viewed: bool) -> dict:
    return {
        "id": video.id,
        "folder_id": video.folder_id,
        "title": video.title,
        "description": video.description,
        "thumbnail_key": video.thumbnail_key,
        "duration_seconds": video.duration_seconds,
        "display_order": video.display_order,
        "viewed": viewed,
    }


def get_folder_contents(
    db: Session,
    folder_id: uuid.UUID,
    viewer_id: Optional[uuid.UUID] = None,
) -> dict:
    """
    Direct contents of a folder.

    Args:
        db: Database session.
        folder_id: Folder to list.
        viewer_id: When given, each video is flagged ``viewed`` if this user
            has a view record for it.

    Returns:
        ``{"videos": [...], "child_folders": [...]}``, both ordered by
        display order ascending with unset orders last.
    """
    videos = video_store.find_by_folder_id(db, folder_id, active_only=True)
    child_folders = folder_store.find_by_parent(db, folder_id)

    viewed_ids: set[uuid.UUID] = set()
    if viewer_id is not None:
        viewed_ids = video_store.viewed_video_ids(db, viewer_id, [v.id for v in videos])

    return {
        "videos": [_video_dict(video, video.id in viewed_ids) for video in videos],
        "child_folders": [_folder_summary(db, child) for child in child_folders],
    }


def get_root_folders(db: Session) -> list[dict]:
    """All root folders, each annotated with ``has_content``."""
    return [_folder_summary(db, folder) for folder in folder_store.find_roots(db)]


def get_folder(
    db: Session,
    folder_id: uuid.UUID,
    viewer_id: Optional[uuid.UUID] = None,
) -> dict:
    """Folder fields merged with its contents. Raises ResourceNotFoundError."""
    folder = folder_store.find_by_id(db, folder_id)
    if folder is None:
        raise ResourceNotFoundError("Folder", folder_id)

    result = _folder_dict(folder)
    result.update(get_folder_contents(db, folder_id, viewer_id))
    return result


def get_folder_path(db: Session, folder_id: uuid.UUID) -> list[Folder]:
    """
    Breadcrumb from the root folder down to ``folder_id``.

    Raises ResourceNotFoundError when the folder or any ancestor is missing
    or deleted, rather than returning a path that starts part-way down.
    """
    chain = list(iter_ancestry(db, folder_id))
    if not chain:
        raise ResourceNotFoundError("Folder", folder_id)
    if chain[-1].parent_folder_id is not None:
        raise ResourceNotFoundError("Folder", chain[-1].parent_folder_id)
    chain.reverse()
    return chain
