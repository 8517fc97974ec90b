"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_user, get_current_user_id
from .rate_limit import RateLimiter, auth_rate_limit, create_rate_limit

__all__ = [
    "get_current_user",
    "get_current_user_id",
    "JWTBearer",
    "RateLimiter",
    "auth_rate_limit",
    "create_rate_limit",
]
