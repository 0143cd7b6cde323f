"""
Folder permission resolution.

Decides whether a user may act as editor on a folder by walking the folder
ancestry from the folder up to its root, and manages editor grants.

Provides functions for:
- Walking a folder's ancestor chain iteratively
- Checking a user's editor permission on a folder or any ancestor
- Applying the Admin / Global Editor bypass for a caller
- Granting, revoking and listing editors scoped to a folder
"""

import logging
import uuid
from typing import Iterable, Iterator, Optional

from sqlalchemy.orm import Session

from ..models.folder import Folder
from ..models.folder_permission import FolderPermission
from ..models.user import User
from . import folder_store, permission_store
from .caller import CallerContext

logger = logging.getLogger(__name__)


def iter_ancestry(db: Session, folder_id: Optional[uuid.UUID]) -> Iterator[Folder]:
    """
    Yield the folder itself, then each ancestor up to the root.

    Missing or soft-deleted folders end the walk. A parent chain that loops
    back on itself is logged and the walk stops at the repeat.
    """
    seen: set[uuid.UUID] = set()
    current_id = folder_id

    while current_id is not None:
        if current_id in seen:
            logger.warning("Parent cycle detected at folder %s", current_id)
            return
        seen.add(current_id)

        folder = folder_store.find_by_id(db, current_id)
        if folder is None:
            return
        yield folder
        current_id = folder.parent_folder_id


def has_permission(db: Session, user_id: uuid.UUID, folder_id: uuid.UUID) -> bool:
    """
    Return True if the user holds an active editor grant on the folder or
    on any of its ancestors. Unknown folders resolve to False.
    """
    for folder in iter_ancestry(db, folder_id):
        if permission_store.find_active_grant(db, user_id, folder.id) is not None:
            logger.debug("User %s is editor of %s via folder %s", user_id, folder_id, folder.id)
            return True
    return False


def can_edit_folder(
    db: Session,
    caller: CallerContext,
    folder_id: Optional[uuid.UUID],
) -> bool:
    """Role bypass first, then the ancestor walk. A None folder is only editable by bypass roles."""
    if caller.bypasses_folder_checks:
        return True
    if folder_id is None:
        return False
    return has_permission(db, caller.user_id, folder_id)


def grant_editors(
    db: Session,
    grantee_ids: Iterable[uuid.UUID],
    granter_id: uuid.UUID,
    folder_id: uuid.UUID,
) -> list[FolderPermission]:
    """Create one active editor grant per id. Existing grants are not checked."""
    grants = permission_store.create_grants(db, grantee_ids, granter_id, folder_id)
    if grants:
        logger.info(
            "User %s granted editor on folder %s to %s",
            granter_id, folder_id, [str(g.user_id) for g in grants],
        )
    return grants


def revoke_editors(
    db: Session,
    grantee_ids: Iterable[uuid.UUID],
    folder_id: uuid.UUID,
) -> int:
    """
    Soft-delete every active grant, of any kind, for each user on exactly
    this folder. Grants held on ancestors are untouched.
    """
    revoked = 0
    for user_id in grantee_ids:
        revoked += permission_store.soft_delete_grants(db, user_id, folder_id)
    if revoked:
        logger.info("Revoked %d grant(s) on folder %s", revoked, folder_id)
    return revoked


def list_editors(db: Session, folder_id: uuid.UUID) -> list[User]:
    """Distinct users with an active editor grant scoped directly to the folder, by first grant."""
    editors: list[User] = []
    seen: set[uuid.UUID] = set()
    for grant in permission_store.find_active_by_folder(db, folder_id):
        if grant.user_id in seen:
            continue
        seen.add(grant.user_id)
        editors.append(grant.user)
    return editors


def diff_editor_ids(
    current: Iterable[uuid.UUID],
    desired: Iterable[uuid.UUID],
) -> tuple[list[uuid.UUID], list[uuid.UUID]]:
    """Split a desired editor set into ``(to_add, to_remove)`` against the current one."""
    current_ids = list(dict.fromkeys(current))
    desired_ids = list(dict.fromkeys(desired))
    to_add = [user_id for user_id in desired_ids if user_id not in current_ids]
    to_remove = [user_id for user_id in current_ids if user_id not in desired_ids]
    return to_add, to_remove
