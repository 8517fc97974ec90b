"""
Note authorization.

Every note operation goes through :meth:`AccessControl.resolve`: the note is
loaded with its collaborator rows and the caller's tier is computed from
them. Nothing here is cached, each call reads the current rows.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from ..context import RequestContext, resolve_logger
from ..exceptions import ForbiddenError, NotFoundError
from ..models.collaborator import NoteCollaborator
from ..models.note import Note
from ..repositories.interfaces import ICollaboratorRepository, INoteRepository

NOTE_NOT_FOUND = "Note not found"
NO_ACCESS = "You do not have permission to access this note"
OWNER_ONLY_DELETE = "Only the owner may delete this note"
OWNER_ONLY_SHARE = "Only the owner may share this note"


class AccessTier(str, Enum):
    """Relationship between a user and a note."""

    UNRELATED = "unrelated"
    COLLABORATOR = "collaborator"
    OWNER = "owner"


@dataclass
class ResolvedNote:
    note: Note
    is_owner: bool
    collaborators: List[NoteCollaborator] = field(default_factory=list)

    @property
    def collaborator_ids(self) -> List[int]:
        return [c.user_id for c in self.collaborators]


def tier_for(note: Note, collaborators: Iterable[NoteCollaborator], user_id: int) -> AccessTier:
    if note.is_owned_by(user_id):
        return AccessTier.OWNER
    if any(c.user_id == user_id for c in collaborators):
        return AccessTier.COLLABORATOR
    return AccessTier.UNRELATED


class AccessControl:
    """Owner/collaborator checks shared by every note operation."""

    def __init__(
        self,
        note_repo: INoteRepository,
        collaborator_repo: ICollaboratorRepository,
        ctx: Optional[RequestContext] = None,
    ):
        self.note_repo = note_repo
        self.collaborator_repo = collaborator_repo
        self.log = resolve_logger(ctx, "access")

    async def resolve(self, note_id: int, user_id: int) -> ResolvedNote:
        """Load the note and fail unless the user owns or collaborates on it."""
        note = await self.note_repo.find_one(note_id)
        if note is None:
            raise NotFoundError(NOTE_NOT_FOUND)

        collaborators = await self.collaborator_repo.find_by_note(note_id)
        tier = tier_for(note, collaborators, user_id)
        if tier is AccessTier.UNRELATED:
            self.log.warning(
                "Note access denied",
                extra={"action": "note_access_denied", "note_id": note_id, "user_id": user_id},
            )
            raise ForbiddenError(NO_ACCESS)

        return ResolvedNote(
            note=note, is_owner=tier is AccessTier.OWNER, collaborators=collaborators
        )

    async def authorize_mutation(self, note_id: int, user_id: int) -> Note:
        """Owner or collaborator may update."""
        resolved = await self.resolve(note_id, user_id)
        return resolved.note

    async def authorize_owner_only(self, note_id: int, user_id: int, message: str) -> ResolvedNote:
        resolved = await self.resolve(note_id, user_id)
        if not resolved.is_owner:
            self.log.warning(
                "Owner-only operation refused",
                extra={"action": "owner_only_denied", "note_id": note_id, "user_id": user_id},
            )
            raise ForbiddenError(message)
        return resolved
