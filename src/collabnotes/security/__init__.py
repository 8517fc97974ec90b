"""Security utilities."""

from .jwt import TokenPayload, create_access_token, decode_access_token, token_lifetime_seconds
from .password import hash_password, needs_update, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "TokenPayload",
    "create_access_token",
    "decode_access_token",
    "token_lifetime_seconds",
]
