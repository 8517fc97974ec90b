"""API routers for collabnotes."""

from .auth import router as auth_router
from .errors import register_exception_handlers
from .health import router as health_router
from .notes import router as notes_router

__all__ = ["auth_router", "notes_router", "health_router", "register_exception_handlers"]
