"""Redis cache decorator for computed API payloads.

Results are keyed by a hash of the call arguments (snapshot included), so a
changed snapshot never hits a stale entry. Redis being down only costs a
recomputation.
"""

import functools
import hashlib
import json
import logging
from typing import Any, Callable

import redis.asyncio as redis
from redis.exceptions import RedisError

from gestionloc.config import settings

logger = logging.getLogger(__name__)

_redis_client: redis.Redis | None = None


async def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(settings.redis_url, decode_responses=True)
    return _redis_client


def _cache_key(prefix: str, *args: Any, **kwargs: Any) -> str:
    """Generate a deterministic cache key from function arguments."""
    raw = json.dumps({"args": args, "kwargs": kwargs}, sort_keys=True, default=str)
    h = hashlib.sha256(raw.encode()).hexdigest()[:16]
    return f"gestionloc:{prefix}:{h}"


def cached(prefix: str, ttl_seconds: int | None = None):
    """Cache decorator for async functions returning JSON-serializable data.

    Args:
        prefix: Cache key prefix (e.g., "profit:portfolio")
        ttl_seconds: Time-to-live in seconds (default settings.cache_ttl_seconds)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not settings.cache_enabled:
                return await func(*args, **kwargs)

            key = _cache_key(prefix, *args, **kwargs)
            try:
                r = await get_redis()
                cached_value = await r.get(key)
                if cached_value is not None:
                    logger.debug("Cache hit: %s", key)
                    return json.loads(cached_value)
            except RedisError:
                logger.warning("Redis unavailable, skipping cache for %s", key)

            result = await func(*args, **kwargs)

            try:
                r = await get_redis()
                await r.setex(
                    key,
                    ttl_seconds or settings.cache_ttl_seconds,
                    json.dumps(result, default=str),
                )
            except RedisError:
                logger.warning("Failed to write cache for %s", key)

            return result
        return wrapper
    return decorator
