"""Note repository for database operations."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.collaborator import NoteCollaborator
from ..models.note import Note
from .base import commit
from .interfaces import INoteRepository


class NoteRepository(INoteRepository):
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, title: str, content: str, owner_id: int) -> Note:
        """Create new note."""
        note = Note(title=title, content=content, owner_id=owner_id)
        self.session.add(note)
        await commit(self.session)
        await self.session.refresh(note)
        return note

    async def save(self, note: Note) -> Note:
        self.session.add(note)
        await commit(self.session)
        await self.session.refresh(note)
        return note

    async def find_one(self, note_id: int) -> Optional[Note]:
        """Get note by ID."""
        # populate_existing so rows changed by other sessions are not served stale
        stmt = select(Note).where(Note.id == note_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_owner(self, owner_id: int) -> List[Note]:
        """List notes owned by the user, newest update first."""
        stmt = (
            select(Note)
            .where(Note.owner_id == owner_id)
            .order_by(desc(Note.updated_at), desc(Note.id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def find_shared_with(self, user_id: int) -> List[Note]:
        """List notes shared with the user."""
        stmt = (
            select(Note)
            .join(NoteCollaborator, NoteCollaborator.note_id == Note.id)
            .where(NoteCollaborator.user_id == user_id)
            .order_by(desc(NoteCollaborator.created_at), desc(NoteCollaborator.id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def remove(self, note: Note) -> None:
        """Delete note, collaborator rows are removed by ON DELETE CASCADE."""
        await self.session.delete(note)
        await commit(self.session)
