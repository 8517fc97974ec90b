# Note <-> user join rows created by sharing
from sqlalchemy import ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class NoteCollaborator(BaseModel):
    """Grants a user read/update access to someone else's note."""

    __tablename__ = "note_collaborators"

    note_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        # final authority on duplicates, the service pre-check can race
        UniqueConstraint("note_id", "user_id", name="uq_note_collaborators_note_user"),
        Index("idx_note_collaborators_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteCollaborator(note_id={self.note_id}, user_id={self.user_id})>"
