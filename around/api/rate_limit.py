"""Fixed-window rate limiting per client address, backed by Redis.

Counters live under ``rate:<client>:<window start>`` and expire with the
window. When Redis cannot be reached, requests are let through.
"""

import logging
import time
from dataclasses import dataclass

import redis.asyncio as aioredis
from fastapi import Request
from redis.exceptions import RedisError

from around.config import get_settings
from around.errors import RateLimitExceededError

logger = logging.getLogger(__name__)

_redis: aioredis.Redis | None = None


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of one rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    reset: int  # seconds until the window closes

    def headers(self) -> dict[str, str]:
        return {
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(self.reset),
        }


def get_redis() -> aioredis.Redis:
    """Get the shared async Redis client."""
    global _redis
    if _redis is None:
        _redis = aioredis.from_url(get_settings().redis_url, socket_connect_timeout=1)
    return _redis


def limit_message(limit: int, window_seconds: int) -> str:
    return f"You have exceeded the {limit} requests in {window_seconds // 60} mins limit!"


async def check_rate_limit(
    redis_client: aioredis.Redis,
    client_key: str,
    limit: int,
    window_seconds: int,
    now: int | None = None,
) -> RateLimitResult:
    """Count one request for the client in the current window."""
    if now is None:
        now = int(time.time())
    window_start = now - now % window_seconds
    key = f"rate:{client_key}:{window_start}"

    count = await redis_client.incr(key)
    if count == 1:
        await redis_client.expire(key, window_seconds)

    return RateLimitResult(
        allowed=count <= limit,
        limit=limit,
        remaining=max(limit - count, 0),
        reset=window_start + window_seconds - now,
    )


async def enforce_rate_limit(request: Request) -> None:
    """Application-wide dependency rejecting clients over the window limit."""
    settings = get_settings()
    if not settings.rate_limit_enabled:
        return

    client_key = request.client.host if request.client else "unknown"
    try:
        result = await check_rate_limit(
            get_redis(),
            client_key,
            settings.rate_limit_requests,
            settings.rate_limit_window_seconds,
        )
    except RedisError as e:
        logger.warning(f"Rate limit check skipped, Redis unavailable: {e}")
        return

    request.state.rate_limit = result
    if not result.allowed:
        logger.warning(f"Rate limit exceeded for {client_key}")
        raise RateLimitExceededError(
            limit_message(result.limit, settings.rate_limit_window_seconds),
            headers={**result.headers(), "Retry-After": str(result.reset)},
        )
