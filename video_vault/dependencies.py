"""
Request dependencies: caller identification and folder edit guards.

The identity provider is trusted to have put the platform user id in the
configured header; this module only maps it to a ``CallerContext``.
"""

import uuid
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .config import settings
from .database import get_db
from .exceptions import ForbiddenError, UnauthorizedError
from .models.user import User
from .services.caller import CallerContext
from .services.permission_resolver import can_edit_folder


def get_current_caller(request: Request, db: Session = Depends(get_db)) -> CallerContext:
    raw_id = request.headers.get(settings.USER_ID_HEADER)
    if not raw_id:
        raise UnauthorizedError()
    try:
        user_id = uuid.UUID(raw_id)
    except ValueError:
        raise UnauthorizedError("Unauthorized: malformed user id") from None

    user = db.get(User, user_id)
    if user is None or not user.is_active:
        raise UnauthorizedError("Unauthorized: user not found")
    return CallerContext.from_user(user)


def require_folder_editor(
    db: Session,
    caller: CallerContext,
    folder_id: Optional[uuid.UUID],
) -> None:
    """Raise ForbiddenError unless the caller may edit ``folder_id``."""
    if not can_edit_folder(db, caller, folder_id):
        raise ForbiddenError("Access denied for this folder")
