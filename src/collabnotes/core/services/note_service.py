"""Note service implementation."""

from typing import Optional

from ..context import RequestContext, resolve_logger
from ..exceptions import NotFoundError, ValidationFailedError
from ..repositories.interfaces import (
    ICollaboratorRepository,
    INoteRepository,
    IUserRepository,
)
from ..schemas.notes import (
    MessageResponse,
    NoteCreate,
    NoteDetailResponse,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    ShareRequest,
)
from .access_control import OWNER_ONLY_DELETE, OWNER_ONLY_SHARE, AccessControl
from .interfaces import INoteService

COLLABORATOR_NOT_FOUND = "Collaborator user not found"
SELF_SHARE = "Cannot share a note with yourself"
ALREADY_COLLABORATOR = "User is already a collaborator"


class NoteService(INoteService):
    """Note lifecycle and sharing."""

    def __init__(
        self,
        note_repo: INoteRepository,
        collaborator_repo: ICollaboratorRepository,
        user_repo: IUserRepository,
        ctx: Optional[RequestContext] = None,
    ):
        self.note_repo = note_repo
        self.collaborator_repo = collaborator_repo
        self.user_repo = user_repo
        self.access = AccessControl(note_repo, collaborator_repo, ctx)
        self.log = resolve_logger(ctx, "notes")

    async def create_note(self, owner_id: int, request: NoteCreate) -> NoteResponse:
        """Create new note owned by the caller."""
        self.log.info(
            "Creating new note",
            extra={"action": "create_note_attempt", "user_id": owner_id, "title": request.title},
        )
        note = await self.note_repo.create(
            title=request.title, content=request.content or "", owner_id=owner_id
        )
        self.log.info(
            "Note created successfully",
            extra={"action": "create_note_success", "user_id": owner_id, "note_id": note.id},
        )
        return NoteResponse.from_note(note)

    async def list_for_user(self, user_id: int) -> NoteListResponse:
        """Own notes (latest update first) and notes shared with the user."""
        own = await self.note_repo.find_by_owner(user_id)
        shared = await self.note_repo.find_shared_with(user_id)
        self.log.info(
            "Notes retrieved successfully",
            extra={"action": "get_all_notes_success", "user_id": user_id, "count": len(own) + len(shared)},
        )
        return NoteListResponse(
            own=[NoteResponse.from_note(n) for n in own],
            shared=[NoteResponse.from_note(n, is_shared=True) for n in shared],
        )

    async def get_note(self, note_id: int, user_id: int) -> NoteDetailResponse:
        resolved = await self.access.resolve(note_id, user_id)
        return NoteDetailResponse(
            note=NoteResponse.from_note(resolved.note, is_shared=not resolved.is_owner),
            is_owner=resolved.is_owner,
            collaborator_ids=resolved.collaborator_ids,
        )

    async def update_note(self, note_id: int, user_id: int, request: NoteUpdate) -> NoteResponse:
        """Apply the fields present in the patch. Owner or collaborator."""
        note = await self.access.authorize_mutation(note_id, user_id)

        changes = request.changes()
        for key, value in changes.items():
            setattr(note, key, value)
        note.touch()

        note = await self.note_repo.save(note)
        self.log.info(
            "Note updated successfully",
            extra={
                "action": "update_note_success",
                "user_id": user_id,
                "note_id": note_id,
                "fields": sorted(changes),
            },
        )
        return NoteResponse.from_note(note, is_shared=note.owner_id != user_id)

    async def delete_note(self, note_id: int, user_id: int) -> MessageResponse:
        resolved = await self.access.authorize_owner_only(note_id, user_id, OWNER_ONLY_DELETE)
        await self.note_repo.remove(resolved.note)
        self.log.info(
            "Note deleted successfully",
            extra={"action": "delete_note_success", "user_id": user_id, "note_id": note_id},
        )
        return MessageResponse(message="Note deleted")

    async def share_note(self, note_id: int, owner_id: int, request: ShareRequest) -> MessageResponse:
        """Add a collaborator to a note.

        Check order matters: the target user is resolved before the
        self-share and duplicate checks because both need its id.
        """
        self.log.info(
            "Sharing note with user",
            extra={
                "action": "share_note_attempt",
                "user_id": owner_id,
                "note_id": note_id,
                "target_email": request.email,
            },
        )
        await self.access.authorize_owner_only(note_id, owner_id, OWNER_ONLY_SHARE)

        collaborator = await self.user_repo.find_by_email(request.email)
        if collaborator is None:
            raise NotFoundError(COLLABORATOR_NOT_FOUND)

        if collaborator.id == owner_id:
            raise ValidationFailedError(SELF_SHARE)

        existing = await self.collaborator_repo.find_one(note_id, collaborator.id)
        if existing is not None:
            raise ValidationFailedError(ALREADY_COLLABORATOR)

        # a concurrent share can still win here, the unique index turns that into ConflictError
        await self.collaborator_repo.create(note_id, collaborator.id)

        self.log.info(
            "Note shared successfully",
            extra={
                "action": "share_note_success",
                "user_id": owner_id,
                "note_id": note_id,
                "collaborator_id": collaborator.id,
            },
        )
        return MessageResponse(message="Note shared successfully")
