"""
Folder API routes.

Thin HTTP layer over the folder core: identifies the caller, enforces the
editor guard on mutations and maps core results to response schemas.
"""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_caller, require_folder_editor
from ..schemas.folder import (
    FolderCreate,
    FolderUpdate,
    FolderResponse,
    FolderSummary,
    FolderWithContents,
    PermissionCheckResponse,
)
from ..schemas.user import UserResponse
from ..services.caller import CallerContext
from ..services.folder_contents import get_folder, get_folder_path, get_root_folders
from ..services.folder_lifecycle import create_folder, delete_folder_recursively, update_folder
from ..services.permission_resolver import can_edit_folder, list_editors


router = APIRouter(prefix="/api/folders", tags=["folders"])


@router.get("", response_model=list[FolderSummary])
def list_root_folders(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """List root folders, each flagged with whether it has direct content."""
    return get_root_folders(db)


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
def create(
    folder_data: FolderCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """
    Create a folder.

    Creating under a parent requires editor rights on the parent; root
    folders can only be created by admins and global editors.
    """
    require_folder_editor(db, caller, folder_data.parent_folder_id)
    return create_folder(db, folder_data, caller)


@router.get("/{folder_id}", response_model=FolderWithContents)
def read(
    folder_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """Get a folder with its direct videos and child folders."""
    return get_folder(db, folder_id, viewer_id=caller.user_id)


@router.get("/{folder_id}/path", response_model=list[FolderResponse])
def read_path(
    folder_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """Breadcrumb from the root folder down to this folder."""
    return get_folder_path(db, folder_id)


@router.get("/{folder_id}/check-permission", response_model=PermissionCheckResponse)
def check_permission(
    folder_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    return {"has_permission": can_edit_folder(db, caller, folder_id)}


@router.get("/{folder_id}/editors", response_model=list[UserResponse])
def read_editors(
    folder_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """Users holding an editor grant on exactly this folder."""
    return list_editors(db, folder_id)


@router.patch("/{folder_id}", response_model=FolderResponse)
def update(
    folder_id: uuid.UUID,
    folder_data: FolderUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    require_folder_editor(db, caller, folder_id)
    return update_folder(db, folder_id, folder_data, caller)


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    folder_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
):
    """Delete a folder, its sub-folders and detach and deactivate their videos."""
    require_folder_editor(db, caller, folder_id)
    delete_folder_recursively(db, folder_id)
    return None
