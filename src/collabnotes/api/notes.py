"""Notes API endpoints."""

from fastapi import APIRouter, Depends, status

from ..core.schemas.notes import (
    MessageResponse,
    NoteCreate,
    NoteDetailResponse,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    ShareRequest,
)
from ..core.services import NoteService
from ..middleware.auth import get_current_user_id
from ..middleware.rate_limit import create_rate_limit
from .deps import get_note_service

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post(
    "/",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(create_rate_limit)],
)
async def create_note(
    request: NoteCreate,
    current_user_id: int = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    return await note_service.create_note(current_user_id, request)


@router.get("/", response_model=NoteListResponse)
async def list_notes(
    current_user_id: int = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """List own notes and notes shared with the caller."""
    return await note_service.list_for_user(current_user_id)


@router.get("/{note_id}", response_model=NoteDetailResponse)
async def get_note(
    note_id: int,
    current_user_id: int = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Get a specific note."""
    return await note_service.get_note(note_id, current_user_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    request: NoteUpdate,
    current_user_id: int = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Update a note. Owner or collaborator."""
    return await note_service.update_note(note_id, current_user_id, request)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: int,
    current_user_id: int = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete a note. Owner only."""
    return await note_service.delete_note(note_id, current_user_id)


@router.post("/{note_id}/share", response_model=MessageResponse)
async def share_note(
    note_id: int,
    request: ShareRequest,
    current_user_id: int = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Share a note with another user by email. Owner only."""
    return await note_service.share_note(note_id, current_user_id, request)
