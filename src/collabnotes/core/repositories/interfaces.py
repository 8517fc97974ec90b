"""
Repository interfaces.

The services only talk to these; the SQLAlchemy classes next to this module
are one implementation, the in-memory fakes in the tests are another.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.collaborator import NoteCollaborator
from ..models.note import Note
from ..models.user import User


class IUserRepository(ABC):
    """Credential store."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by id."""
        pass

    @abstractmethod
    async def create(self, email: str, password_hash: str) -> User:
        """Insert user. Raises ConflictError if the email is taken."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist pending changes on a user."""
        pass


class INoteRepository(ABC):
    """Note rows."""

    @abstractmethod
    async def create(self, title: str, content: str, owner_id: int) -> Note:
        pass

    @abstractmethod
    async def save(self, note: Note) -> Note:
        pass

    @abstractmethod
    async def find_one(self, note_id: int) -> Optional[Note]:
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: int) -> List[Note]:
        """Owned notes, most recently updated first."""
        pass

    @abstractmethod
    async def find_shared_with(self, user_id: int) -> List[Note]:
        """Notes the user collaborates on."""
        pass

    @abstractmethod
    async def remove(self, note: Note) -> None:
        """Delete note; its collaborator rows go with it."""
        pass


class ICollaboratorRepository(ABC):
    """Note/user collaboration rows."""

    @abstractmethod
    async def find_by_user(self, user_id: int) -> List[NoteCollaborator]:
        pass

    @abstractmethod
    async def find_by_note(self, note_id: int) -> List[NoteCollaborator]:
        pass

    @abstractmethod
    async def find_one(self, note_id: int, user_id: int) -> Optional[NoteCollaborator]:
        pass

    @abstractmethod
    async def create(self, note_id: int, user_id: int) -> NoteCollaborator:
        """Insert pair. Raises ConflictError on the unique constraint."""
        pass
