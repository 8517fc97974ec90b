"""
Service layer interfaces and implementations.
"""

from .access_control import AccessControl, AccessTier, ResolvedNote
from .auth_service import AuthService
from .health_service import HealthService
from .interfaces import IAuthService, IHealthService, INoteService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "IHealthService",

    # Implementations
    "AccessControl",
    "AccessTier",
    "ResolvedNote",
    "AuthService",
    "NoteService",
    "HealthService",
]
