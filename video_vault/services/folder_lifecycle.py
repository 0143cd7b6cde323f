"""
Folder lifecycle: create, update, soft delete and cascading delete.

Each public operation runs in a single transaction: it commits once on
success and rolls back everything it did on any error.
"""

import logging
import uuid

from sqlalchemy.orm import Session

from ..database import transaction
from ..exceptions import ResourceNotFoundError
from ..models.folder import Folder
from ..schemas.folder import FolderCreate, FolderUpdate
from . import folder_store, video_store
from .caller import CallerContext
from .permission_resolver import grant_editors, revoke_editors

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "description", "display_order"}


def _get_folder_or_404(db: Session, folder_id: uuid.UUID) -> Folder:
    folder = folder_store.find_by_id(db, folder_id)
    if folder is None:
        raise ResourceNotFoundError("Folder", folder_id)
    return folder


def create_folder(db: Session, data: FolderCreate, caller: CallerContext) -> Folder:
    """
    Create a folder, at the root or under ``data.parent_folder_id``.

    The parent is not checked for existence. Editors listed in
    ``data.editor_to_add_ids`` are granted on the new folder by the caller.
    """
    with transaction(db):
        folder = folder_store.create(
            db,
            name=data.name,
            description=data.description,
            parent_folder_id=data.parent_folder_id,
            display_order=data.display_order,
            created_by_user_id=caller.user_id,
        )
        if data.editor_to_add_ids:
            grant_editors(db, data.editor_to_add_ids, caller.user_id, folder.id)

    db.refresh(folder)
    logger.info("User %s created folder %s (parent=%s)", caller.user_id, folder.id, folder.parent_folder_id)
    return folder


def update_folder(
    db: Session,
    folder_id: uuid.UUID,
    data: FolderUpdate,
    caller: CallerContext,
) -> Folder:
    """
    Apply the fields present in ``data`` and reconcile editor grants.

    Omitted fields are untouched; a null name is ignored since a folder
    always has one.
    """
    folder = _get_folder_or_404(db, folder_id)

    update_data = data.model_dump(exclude_unset=True, include=UPDATABLE_FIELDS)
    if update_data.get("name", "") is None:
        del update_data["name"]

    with transaction(db):
        if data.editor_to_add_ids:
            grant_editors(db, data.editor_to_add_ids, caller.user_id, folder.id)
        if data.editor_to_remove_ids:
            revoke_editors(db, data.editor_to_remove_ids, folder.id)
        folder_store.update(db, folder, update_data)

    db.refresh(folder)
    logger.info("User %s updated folder %s: %s", caller.user_id, folder.id, sorted(update_data))
    return folder


def delete_folder(db: Session, folder_id: uuid.UUID) -> None:
    """
    Soft-delete a single folder without touching its contents.

    Does not refuse non-empty folders; callers check ``has_content`` first.
    """
    folder = _get_folder_or_404(db, folder_id)
    with transaction(db):
        folder_store.soft_delete(db, folder)
    logger.info("Deleted folder %s", folder_id)


def delete_folder_recursively(db: Session, folder_id: uuid.UUID) -> int:
    """
    Soft-delete a folder and its whole subtree, children before parents.

    For every folder visited, its active videos are first detached from the
    folder and then deactivated, its child folders are processed, and
    finally the folder itself is soft-deleted. The walk uses an explicit
    stack and runs in one transaction, so a failure leaves nothing applied.

    Returns:
        Number of folders deleted.
    """
    root = _get_folder_or_404(db, folder_id)
    deleted = 0
    detached = 0

    with transaction(db):
        stack: list[tuple[Folder, bool]] = [(root, False)]
        while stack:
            folder, children_done = stack.pop()
            if children_done:
                folder_store.soft_delete(db, folder)
                deleted += 1
                continue

            for video in video_store.find_by_folder_id(db, folder.id, active_only=True):
                video_store.detach(db, video)
                video_store.deactivate(db, video)
                detached += 1

            stack.append((folder, True))
            for child in reversed(folder_store.find_by_parent(db, folder.id)):
                stack.append((child, False))

    logger.info(
        "Deleted folder %s recursively: %d folder(s), %d video(s) deactivated",
        folder_id, deleted, detached,
    )
    return deleted
