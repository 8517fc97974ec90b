"""User repository for database operations."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflictError, PersistenceError
from ..models.user import User
from .base import DATABASE_ERROR, commit, is_unique_violation
from .interfaces import IUserRepository


class UserRepository(IUserRepository):
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, email: str, password_hash: str) -> User:
        """Create new user."""
        user = User(email=email, password_hash=password_hash)
        self.session.add(user)
        try:
            await commit(self.session)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ConflictError("Email is already registered") from e
            raise PersistenceError(DATABASE_ERROR) from e
        await self.session.refresh(user)
        return user

    async def save(self, user: User) -> User:
        self.session.add(user)
        await commit(self.session)
        await self.session.refresh(user)
        return user

    async def find_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
