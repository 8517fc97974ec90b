"""Redis client used for request rate limiting."""

import logging
from typing import Optional

import redis.asyncio as redis

from ..config import get_settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Thin async Redis wrapper. Every call degrades to a no-op when disconnected."""

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Connect to Redis."""
        try:
            self.redis = redis.from_url(
                self.settings.redis_url,
                max_connections=self.settings.redis_max_connections,
                decode_responses=True
            )
            # Test connection
            await self.redis.ping()
            logger.info("Connected to Redis successfully")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            self.redis = None
            raise

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def ping(self) -> bool:
        if not self.redis:
            return False
        try:
            return bool(await self.redis.ping())
        except Exception as e:
            logger.error(f"Redis PING error: {e}")
            return False

    # Rate limiting
    async def increment_rate_limit(self, key: str, expire: int = 60) -> int:
        """Increment a fixed-window counter. Returns 0 when Redis is unavailable."""
        try:
            if not self.redis:
                return 0
            async with self.redis.pipeline() as pipe:
                await pipe.incr(key)
                # NX keeps the window anchored at the first hit
                await pipe.expire(key, expire, nx=True)
                results = await pipe.execute()
                return results[0] if results else 0
        except Exception as e:
            logger.error(f"Rate limit error for key {key}: {e}")
            return 0


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
