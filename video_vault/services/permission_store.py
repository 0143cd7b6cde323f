"""
Folder permission persistence.

Grants are appended, never deduplicated; revocation soft-deletes rows.
Every read ignores revoked rows.
"""

import uuid
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..models.folder_permission import FolderPermission, PermissionType


def create_grants(
    db: Session,
    user_ids: Iterable[uuid.UUID],
    granted_by_user_id: uuid.UUID,
    folder_id: uuid.UUID,
    permission_type: PermissionType = PermissionType.EDITOR,
) -> list[FolderPermission]:
    grants = [
        FolderPermission(
            folder_id=folder_id,
            user_id=user_id,
            permission_type=permission_type,
            granted_by_user_id=granted_by_user_id,
        )
        for user_id in user_ids
    ]
    db.add_all(grants)
    db.flush()
    return grants


def find_active_grant(
    db: Session,
    user_id: uuid.UUID,
    folder_id: uuid.UUID,
    permission_type: PermissionType = PermissionType.EDITOR,
) -> Optional[FolderPermission]:
    return db.scalars(
        select(FolderPermission).where(
            FolderPermission.user_id == user_id,
            FolderPermission.folder_id == folder_id,
            FolderPermission.permission_type == permission_type,
            FolderPermission.not_deleted(),
        )
    ).first()


def find_active_by_folder(
    db: Session,
    folder_id: uuid.UUID,
    permission_type: PermissionType = PermissionType.EDITOR,
) -> list[FolderPermission]:
    """Active grants scoped directly to ``folder_id``, oldest first, with grantees loaded."""
    stmt = (
        select(FolderPermission)
        .options(joinedload(FolderPermission.user))
        .where(
            FolderPermission.folder_id == folder_id,
            FolderPermission.permission_type == permission_type,
            FolderPermission.not_deleted(),
        )
        .order_by(FolderPermission.created_at, FolderPermission.id)
    )
    return list(db.scalars(stmt))


def soft_delete_grants(
    db: Session,
    user_id: uuid.UUID,
    folder_id: uuid.UUID,
    permission_type: Optional[PermissionType] = None,
) -> int:
    """
    Revoke every active grant for (user, folder); returns how many rows changed.

    With no ``permission_type`` grants of every kind are revoked.
    """
    stmt = select(FolderPermission).where(
        FolderPermission.user_id == user_id,
        FolderPermission.folder_id == folder_id,
        FolderPermission.not_deleted(),
    )
    if permission_type is not None:
        stmt = stmt.where(FolderPermission.permission_type == permission_type)
    grants = db.scalars(stmt).all()
    for grant in grants:
        grant.soft_delete()
    db.flush()
    return len(grants)
