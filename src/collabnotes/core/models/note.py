# Note model for user content
from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, utcnow


class Note(BaseModel):
    """Note owned by exactly one user."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default="")

    # owner reference, ownership never transfers
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
        Index("idx_notes_owner_updated", "owner_id", "updated_at"),
        # Enforce title length (SQLite compatible)
        CheckConstraint("length(title) >= 1 AND length(title) <= 255", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def touch(self) -> None:
        """Bump updated_at, even when no column value changed."""
        self.updated_at = utcnow()
