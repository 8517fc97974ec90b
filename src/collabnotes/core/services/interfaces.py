"""
Service interfaces for the collabnotes application.
"""

from abc import ABC, abstractmethod

from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import (
    MessageResponse,
    NoteCreate,
    NoteDetailResponse,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    ShareRequest,
)


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> AuthResponse:
        """Check credentials and issue a token."""
        pass

    @abstractmethod
    async def get_user(self, user_id: int) -> UserResponse:
        """Get user by ID."""
        pass


class INoteService(ABC):
    """Note service for CRUD and sharing."""

    @abstractmethod
    async def create_note(self, owner_id: int, request: NoteCreate) -> NoteResponse:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> NoteListResponse:
        pass

    @abstractmethod
    async def get_note(self, note_id: int, user_id: int) -> NoteDetailResponse:
        pass

    @abstractmethod
    async def update_note(self, note_id: int, user_id: int, request: NoteUpdate) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, note_id: int, user_id: int) -> MessageResponse:
        pass

    @abstractmethod
    async def share_note(self, note_id: int, owner_id: int, request: ShareRequest) -> MessageResponse:
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall health status."""
        pass
