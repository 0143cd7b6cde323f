"""
Folder persistence.

All reads exclude soft-deleted folders. Functions flush but never commit;
the calling lifecycle operation owns the transaction.
"""

import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models.folder import Folder


def display_order_key(column):
    """ORDER BY clauses for display order ascending with NULLs last."""
    return (column.is_(None), column)


def find_by_id(db: Session, folder_id: uuid.UUID) -> Optional[Folder]:
    return db.scalars(
        select(Folder).where(Folder.id == folder_id, Folder.not_deleted())
    ).first()


def find_by_parent(db: Session, parent_id: Optional[uuid.UUID]) -> list[Folder]:
    """Direct, non-deleted children of ``parent_id`` (roots when None), ordered for display."""
    if parent_id is None:
        parent_filter = Folder.parent_folder_id.is_(None)
    else:
        parent_filter = Folder.parent_folder_id == parent_id
    stmt = (
        select(Folder)
        .where(parent_filter, Folder.not_deleted())
        .order_by(*display_order_key(Folder.display_order), Folder.created_at, Folder.id)
    )
    return list(db.scalars(stmt))


def find_roots(db: Session) -> list[Folder]:
    return find_by_parent(db, None)


def count_by_parent(db: Session, parent_id: uuid.UUID) -> int:
    return db.scalar(
        select(func.count())
        .select_from(Folder)
        .where(Folder.parent_folder_id == parent_id, Folder.not_deleted())
    )


def create(
    db: Session,
    *,
    name: str,
    created_by_user_id: uuid.UUID,
    parent_folder_id: Optional[uuid.UUID] = None,
    description: Optional[str] = None,
    display_order: Optional[int] = None,
) -> Folder:
    folder = Folder(
        name=name,
        description=description,
        parent_folder_id=parent_folder_id,
        display_order=display_order,
        created_by_user_id=created_by_user_id,
    )
    db.add(folder)
    db.flush()
    return folder


def update(db: Session, folder: Folder, fields: dict) -> Folder:
    for field, value in fields.items():
        setattr(folder, field, value)
    db.flush()
    return folder


def soft_delete(db: Session, folder: Folder) -> None:
    folder.soft_delete()
    db.flush()
