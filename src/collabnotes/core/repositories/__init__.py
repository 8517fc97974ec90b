"""Repository layer for data access."""

from .collaborator_repository import CollaboratorRepository
from .interfaces import ICollaboratorRepository, INoteRepository, IUserRepository
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "IUserRepository",
    "INoteRepository",
    "ICollaboratorRepository",
    "UserRepository",
    "NoteRepository",
    "CollaboratorRepository",
]
