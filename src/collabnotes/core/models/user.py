"""
User model for authentication.
"""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account, identified by email."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # never serialized, see UserResponse
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (Index("idx_users_email", "email"),)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"

    def to_dict(self):
        data = super().to_dict()
        data.pop("password_hash", None)
        return data
