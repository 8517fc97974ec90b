"""Authentication middleware."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer

from ..core.exceptions import UnauthorizedError
from ..security import TokenPayload, decode_access_token

MISSING_HEADER = "Missing authorization header"
INVALID_HEADER = "Invalid authorization header format"


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Reads the header itself so a missing header and a malformed one get
    different messages; both are 401.
    """

    def __init__(self, auto_error: bool = False):
        super(JWTBearer, self).__init__(auto_error=auto_error)

    async def __call__(self, request: Request) -> TokenPayload:
        authorization: Optional[str] = request.headers.get("Authorization")
        if not authorization:
            raise UnauthorizedError(MISSING_HEADER)

        scheme, _, token = authorization.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            raise UnauthorizedError(INVALID_HEADER)

        return decode_access_token(token)


# Dependency for getting current identity from JWT
async def get_current_user(payload: TokenPayload = Depends(JWTBearer())) -> TokenPayload:
    """Get current authenticated identity."""
    return payload


async def get_current_user_id(user: TokenPayload = Depends(get_current_user)) -> int:
    """Get current authenticated user ID."""
    return user.id
