"""
Per-User Chat Rate Limiter

Admission check run before every chat or voice turn. Counting is delegated to
one atomic check-and-increment procedure in the store, so this module holds no
state and is safe to call concurrently from independent requests.

Fails open: if the store errors or answers with an unexpected shape, the turn
is allowed.

Usage:
    from chat_router.rate_limiter import check_rate_limit, retry_after_seconds

    result = await check_rate_limit(store, user_id)
    if not result.allowed:
        headers["Retry-After"] = str(retry_after_seconds(result))
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import structlog

from shared.config import DEFAULT_CHAT_RATE_LIMIT, DEFAULT_CHAT_RATE_LIMIT_WINDOW_SECONDS
from shared.store_client import RoutingStore

logger = structlog.get_logger("chat_router.rate_limiter")

# Shared by the text and voice chat paths
RATE_LIMIT_RPC = "check_and_increment_chat_rate_limit"

DEFAULT_RETRY_AFTER_MS = 60_000


@dataclass
class RateLimitConfig:
    """Configuration for the per-user rate limit."""
    limit: int = DEFAULT_CHAT_RATE_LIMIT
    window_seconds: int = DEFAULT_CHAT_RATE_LIMIT_WINDOW_SECONDS

    def __post_init__(self):
        if self.limit <= 0:
            raise ValueError("limit must be a positive integer")
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be a positive integer")


@dataclass
class RateLimitResult:
    """Admission decision. retry_after_ms is only set on a denial with a store hint."""
    allowed: bool
    retry_after_ms: Optional[int] = None


def _first_row(payload: Any) -> Optional[Dict[str, Any]]:
    if isinstance(payload, list):
        payload = payload[0] if payload else None
    return payload if isinstance(payload, dict) else None


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


async def check_rate_limit(
    store: RoutingStore,
    user_id: str,
    config: Optional[RateLimitConfig] = None,
) -> RateLimitResult:
    """
    Check and count one request for a user.

    Args:
        store: Store exposing the atomic rate-limit procedure
        user_id: Opaque user identifier
        config: Limit and window (defaults to 20 requests per 60 seconds)

    Returns:
        RateLimitResult. Never raises for store failures.
    """
    config = config or RateLimitConfig()

    try:
        payload = await store.rpc(RATE_LIMIT_RPC, {
            "p_user_id": user_id,
            "p_limit": config.limit,
            "p_window_seconds": config.window_seconds,
        })
    except Exception as e:
        logger.warning(
            "rate_limit_check_failed",
            user_id=user_id[:8],
            error=str(e)
        )
        return RateLimitResult(allowed=True)

    row = _first_row(payload)
    if row is None or not isinstance(row.get("allowed"), bool):
        logger.warning(
            "rate_limit_unexpected_payload",
            user_id=user_id[:8],
            payload_type=type(payload).__name__
        )
        return RateLimitResult(allowed=True)

    if row["allowed"]:
        return RateLimitResult(allowed=True)

    retry_after = row.get("retry_after_ms")
    retry_after_ms = int(retry_after) if _is_number(retry_after) else None

    logger.info(
        "rate_limit_exceeded",
        user_id=user_id[:8],
        limit=config.limit,
        window_seconds=config.window_seconds,
        retry_after_ms=retry_after_ms
    )
    return RateLimitResult(allowed=False, retry_after_ms=retry_after_ms)


def retry_after_seconds(result: RateLimitResult, default_ms: int = DEFAULT_RETRY_AFTER_MS) -> int:
    """Seconds for a Retry-After header, rounded up."""
    retry_after_ms = result.retry_after_ms if result.retry_after_ms is not None else default_ms
    return math.ceil(retry_after_ms / 1000)
