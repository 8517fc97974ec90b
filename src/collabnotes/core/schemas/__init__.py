"""Pydantic schemas for request/response validation."""

from .auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .common import ErrorResponse, FieldError, HealthCheckResponse
from .notes import (
    MessageResponse,
    NoteCreate,
    NoteDetailResponse,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    ShareRequest,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteDetailResponse",
    "NoteListResponse",
    "ShareRequest",
    "MessageResponse",
    "ErrorResponse",
    "FieldError",
    "HealthCheckResponse",
]
