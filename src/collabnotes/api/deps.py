"""Request-scoped dependencies wiring repositories into services."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.context import RequestContext
from ..core.repositories import CollaboratorRepository, NoteRepository, UserRepository
from ..core.services import AuthService, HealthService, NoteService
from ..database import get_db_session


def get_request_context(request: Request) -> RequestContext:
    """Context carrying the request id set by ``RequestContextMiddleware``."""
    return RequestContext.for_logger("request", getattr(request.state, "request_id", None))


def get_note_service(
    session: AsyncSession = Depends(get_db_session),
    ctx: RequestContext = Depends(get_request_context),
) -> NoteService:
    return NoteService(
        NoteRepository(session),
        CollaboratorRepository(session),
        UserRepository(session),
        ctx,
    )


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    ctx: RequestContext = Depends(get_request_context),
) -> AuthService:
    return AuthService(UserRepository(session), ctx)


def get_health_service(session: AsyncSession = Depends(get_db_session)) -> HealthService:
    return HealthService(session)
