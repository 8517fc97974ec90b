"""Fixed-window rate limiting backed by Redis."""

import logging
from typing import Optional

from fastapi import Request

from ..config import get_settings
from ..core.exceptions import RateLimitExceededError
from ..core.redis_client import RedisClient, get_redis_client

logger = logging.getLogger(__name__)

LIMIT_MESSAGES = {
    "auth": "Too many authentication attempts, try again later",
    "create": "Too many notes created, try again later",
}


class RateLimiter:
    """Route dependency counting hits per client in a fixed window.

    Limits come from settings at call time. When rate limiting is disabled
    or Redis is unreachable the request is let through.
    """

    def __init__(self, scope: str, redis_client: Optional[RedisClient] = None):
        if scope not in LIMIT_MESSAGES:
            raise ValueError(f"Unknown rate limit scope: {scope}")
        self.scope = scope
        self._redis_client = redis_client

    @property
    def redis_client(self) -> RedisClient:
        return self._redis_client or get_redis_client()

    def limits(self) -> tuple[int, int]:
        settings = get_settings()
        if self.scope == "auth":
            return settings.auth_rate_limit_requests, settings.auth_rate_limit_window_seconds
        return settings.create_rate_limit_requests, settings.create_rate_limit_window_seconds

    @staticmethod
    def client_key(request: Request) -> str:
        return request.client.host if request.client else "unknown"

    async def __call__(self, request: Request) -> None:
        if not get_settings().rate_limit_enabled:
            return

        limit, window = self.limits()
        key = f"rate_limit:{self.scope}:{self.client_key(request)}"
        count = await self.redis_client.increment_rate_limit(key, expire=window)
        if count > limit:
            logger.warning(
                "Rate limit exceeded",
                extra={"scope": self.scope, "key": key, "count": count, "limit": limit},
            )
            raise RateLimitExceededError(LIMIT_MESSAGES[self.scope])


auth_rate_limit = RateLimiter("auth")
create_rate_limit = RateLimiter("create")
