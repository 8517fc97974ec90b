"""Collaborator repository for database operations."""

import logging
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflictError, PersistenceError
from ..models.collaborator import NoteCollaborator
from .base import DATABASE_ERROR, commit, is_unique_violation
from .interfaces import ICollaboratorRepository

logger = logging.getLogger(__name__)

UNIQUE_PAIR = "uq_note_collaborators_note_user"


class CollaboratorRepository(ICollaboratorRepository):
    """Repository for note collaborator rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, note_id: int, user_id: int) -> NoteCollaborator:
        """Create collaboration, mapping a unique violation to a conflict."""
        collaborator = NoteCollaborator(note_id=note_id, user_id=user_id)
        self.session.add(collaborator)
        try:
            await commit(self.session)
        except IntegrityError as e:
            if not is_unique_violation(e, UNIQUE_PAIR):
                # foreign key, e.g. the note was deleted after the access check
                logger.error(
                    "Collaborator insert failed",
                    extra={"note_id": note_id, "user_id": user_id},
                )
                raise PersistenceError(DATABASE_ERROR) from e
            logger.warning(
                "Collaborator insert rejected by constraint",
                extra={"note_id": note_id, "user_id": user_id},
            )
            raise ConflictError("User is already a collaborator") from e
        await self.session.refresh(collaborator)
        return collaborator

    async def find_by_user(self, user_id: int) -> List[NoteCollaborator]:
        stmt = select(NoteCollaborator).where(NoteCollaborator.user_id == user_id)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def find_by_note(self, note_id: int) -> List[NoteCollaborator]:
        stmt = (
            select(NoteCollaborator)
            .where(NoteCollaborator.note_id == note_id)
            .order_by(NoteCollaborator.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def find_one(self, note_id: int, user_id: int) -> Optional[NoteCollaborator]:
        stmt = select(NoteCollaborator).where(
            and_(NoteCollaborator.note_id == note_id, NoteCollaborator.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
