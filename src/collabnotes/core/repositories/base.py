"""Commit handling shared by the SQLAlchemy repositories."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)

DATABASE_ERROR = "Database error"


def is_unique_violation(exc: IntegrityError, constraint: Optional[str] = None) -> bool:
    """True when ``exc`` comes from a unique index rather than a foreign key or check.

    PostgreSQL names the constraint in its message, SQLite only says
    ``UNIQUE constraint failed``.
    """
    message = str(exc.orig).lower()
    if constraint and constraint.lower() in message:
        return True
    return "unique constraint" in message


async def commit(session: AsyncSession) -> None:
    """Commit the session, rolling back when the database refuses.

    ``IntegrityError`` is re-raised for the caller to classify; any other
    database failure becomes ``PersistenceError``.
    """
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error("Commit failed", exc_info=e)
        raise PersistenceError(DATABASE_ERROR) from e
