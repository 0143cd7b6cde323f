"""
User model.

Users are provisioned by the identity collaborator; the core only reads
their id and role.
"""

import enum
import uuid
from datetime import datetime
from typing import List, TYPE_CHECKING

from sqlalchemy import String, Boolean, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base

if TYPE_CHECKING:
    from .folder import Folder


class UserRole(str, enum.Enum):
    ADMIN = "Admin"
    GLOBAL_EDITOR = "Global Editor"
    USER = "User"


class User(Base):
    """
    SQLAlchemy model for platform users.

    Attributes:
        id: Unique identifier for the user
        email: Unique login e-mail
        first_name: Given name
        last_name: Family name
        role: Global role (Admin, Global Editor or User)
        is_active: Inactive users cannot act on the platform
        created_at: Timestamp when the user was created
        updated_at: Timestamp when the user was last updated
    """
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, values_callable=lambda e: [m.value for m in e], native_enum=False),
        default=UserRole.USER,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    folders: Mapped[List["Folder"]] = relationship("Folder", back_populates="created_by_user")
