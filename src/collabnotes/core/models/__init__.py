"""
Database models for the collabnotes application.

SQLAlchemy ORM rows for the three tables. Relations are plain foreign key
columns; joins are written explicitly in the repositories.

Models included:
    - User: account identified by email, password stored as a hash
    - Note: title/content owned by one user
    - NoteCollaborator: note/user pair created by sharing
"""

from .base import BaseModel
from .collaborator import NoteCollaborator
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "NoteCollaborator",
]
