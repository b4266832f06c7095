"""
Redis connection using redis-py's asyncio client.
Includes detailed logging and comprehensive error handling.

The connection is owned by whoever creates it (the application lifespan)
and handed to the store explicitly; there is no process-wide instance.
"""

from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from core.config import Settings
from core.logger import logger


class RedisDatabase:
    """Redis connection manager with async support."""

    def __init__(self, settings: Settings):
        """
        Initialize Redis connection manager.

        Args:
            settings: Application settings carrying the Redis address,
                credential and logical database number
        """
        self.settings = settings
        self._client: Optional[redis.Redis] = None
        logger.debug("Redis connection manager initialized")

    @property
    def client(self) -> redis.Redis:
        """
        Get the underlying Redis client.

        Raises:
            RuntimeError: If connect() has not been called
        """
        if self._client is None:
            error_msg = "Redis not connected. Call connect() first."
            logger.error(f"❌ {error_msg}")
            raise RuntimeError(error_msg)
        return self._client

    async def connect(self) -> None:
        """
        Create the Redis client and its connection pool.

        Connections are opened lazily by the pool, so an unreachable server
        does not fail here; it surfaces on the first command instead.
        """
        host, port = self.settings.redis_address
        logger.info(f"📝 Connecting to Redis: {self.settings.redis_url}")

        # No retry policy: transient errors propagate to the caller as-is
        self._client = redis.Redis(
            host=host,
            port=port,
            password=self.settings.redis_password or None,
            db=self.settings.redis_db,
            socket_timeout=self.settings.redis_socket_timeout,
            retry_on_timeout=False,
            decode_responses=True,
        )
        logger.info(f"✅ Redis client ready: db={self.settings.redis_db}")

    async def disconnect(self) -> None:
        """
        Close the Redis connection pool.

        Safe to call even if not connected.
        """
        try:
            if self._client is not None:
                logger.info("📝 Disconnecting from Redis...")
                await self._client.aclose()
                self._client = None
                logger.info("✅ Disconnected from Redis")
            else:
                logger.debug("Redis client not initialized, nothing to disconnect")

        except RedisError as e:
            logger.error(f"❌ Error disconnecting from Redis: {e}")
            logger.exception("Redis disconnection error details:")
