"""
Note management schemas.

These schemas define the API contracts for note CRUD and sharing.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=255, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Meeting Notes - Q4 Planning",
                "content": "1. Review Q3 performance\n2. Set Q4 objectives",
            }
        }
    )


class NoteUpdate(BaseModel):
    """Partial update, omitted or null fields keep their value."""

    title: Optional[str] = Field(
        default=None, min_length=1, max_length=255, description="Note title"
    )
    content: Optional[str] = Field(default=None, description="Note content")

    def changes(self) -> dict:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class ShareRequest(BaseModel):
    """Share a note with a registered user."""

    email: EmailStr = Field(description="Email of the collaborator")

    model_config = ConfigDict(json_schema_extra={"example": {"email": "b@x.com"}})


class NoteResponse(BaseModel):
    """Note response schema."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    owner_id: int = Field(description="Note owner ID")
    is_shared: bool = Field(
        default=False, description="True when the note reached the user through sharing"
    )
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_note(cls, note, is_shared: bool = False) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content or "",
            owner_id=note.owner_id,
            is_shared=is_shared,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class NoteDetailResponse(BaseModel):
    """Single note as seen by an owner or collaborator."""

    note: NoteResponse
    is_owner: bool = Field(description="Whether the current user owns the note")
    collaborator_ids: List[int] = Field(
        default_factory=list, description="Users the note is shared with"
    )


class NoteListResponse(BaseModel):
    """Own notes plus notes shared with the user."""

    own: List[NoteResponse] = Field(default_factory=list)
    shared: List[NoteResponse] = Field(default_factory=list)


class MessageResponse(BaseModel):
    """Confirmation for operations without a body."""

    message: str
