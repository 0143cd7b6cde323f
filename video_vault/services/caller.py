"""Explicit caller identity passed into resolver and lifecycle calls."""

import uuid
from dataclasses import dataclass

from ..models.user import User, UserRole

BYPASS_ROLES = frozenset({UserRole.ADMIN, UserRole.GLOBAL_EDITOR})


@dataclass(frozen=True)
class CallerContext:
    user_id: uuid.UUID
    role: UserRole

    @property
    def bypasses_folder_checks(self) -> bool:
        """Admins and global editors skip folder-level permission checks."""
        return self.role in BYPASS_ROLES

    @classmethod
    def from_user(cls, user: User) -> "CallerContext":
        return cls(user_id=user.id, role=UserRole(user.role))
