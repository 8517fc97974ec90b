"""Authentication service implementation."""

from typing import Optional

from ...security import (
    create_access_token,
    hash_password,
    needs_update,
    token_lifetime_seconds,
    verify_password,
)
from ..context import RequestContext, resolve_logger
from ..exceptions import ConflictError, NotFoundError, UnauthorizedError
from ..models.user import User
from ..repositories.interfaces import IUserRepository
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, user_repo: IUserRepository, ctx: Optional[RequestContext] = None):
        self.user_repo = user_repo
        self.log = resolve_logger(ctx, "auth")

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        self.log.info(
            "User registration attempt",
            extra={"action": "register_attempt", "email": request.email},
        )
        if await self.user_repo.find_by_email(request.email) is not None:
            raise ConflictError("Email is already registered")

        user = await self.user_repo.create(
            email=request.email, password_hash=hash_password(request.password)
        )
        self.log.info(
            "User registered successfully",
            extra={"action": "register_success", "user_id": user.id},
        )
        return self._issue(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a token."""
        self.log.info("User login attempt", extra={"action": "login_attempt", "email": request.email})

        user = await self.user_repo.find_by_email(request.email)
        # same message for unknown email and wrong password
        if user is None or not verify_password(request.password, user.password_hash):
            self.log.warning("Login failed", extra={"action": "login_error", "email": request.email})
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if needs_update(user.password_hash):
            # rehash under the current scheme while the plain password is at hand
            user.password_hash = hash_password(request.password)
            user = await self.user_repo.save(user)

        self.log.info("User logged in successfully", extra={"action": "login_success", "user_id": user.id})
        return self._issue(user)

    async def get_user(self, user_id: int) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)

    def _issue(self, user: User) -> AuthResponse:
        token = create_access_token({"id": user.id, "email": user.email})
        return AuthResponse(
            user=UserResponse.model_validate(user),
            access_token=token,
            token_type="bearer",
            expires_in=token_lifetime_seconds(),
        )
