"""
Voice Quota Resolution

Resolves a user's monthly voice quota in minutes: a per-user override row when
one is valid and unexpired, otherwise the configured default. Any lookup
failure falls back to the default, so quota resolution never blocks a turn.
"""
import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from shared.config import get_config
from shared.store_client import RoutingStore

logger = structlog.get_logger("chat_router.quota_resolver")

QUOTA_TABLE = "user_voice_quotas"
QUOTA_COLUMNS = "monthly_minutes_limit,expires_at"

# Usage share at which the session start response carries a warning
QUOTA_WARNING_RATIO = 0.8

# PostgREST trims trailing zeros from fractional seconds
_FRACTION = re.compile(r"\.(\d+)")


@dataclass
class QuotaStatus:
    """Voice usage against the resolved quota."""
    allowed: bool
    minutes_used: float
    quota_limit: int
    remaining_minutes: float
    warning: Optional[str] = None


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        text = value.strip().replace("Z", "+00:00")
        text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text, count=1)
        return _as_utc(datetime.fromisoformat(text))
    except (AttributeError, ValueError):
        return None


def _override_minutes(row: Dict[str, Any], now: datetime) -> Optional[int]:
    """Return the row's limit if usable, None otherwise."""
    limit = row.get("monthly_minutes_limit")
    if isinstance(limit, bool) or not isinstance(limit, (int, float)):
        return None
    if not math.isfinite(limit) or limit <= 0:
        return None

    expires_at = row.get("expires_at")
    if expires_at is not None:
        expiry = _parse_timestamp(expires_at)
        if expiry is None or expiry < now:
            return None

    # Fractional overrides round up so the result stays a positive integer
    return math.ceil(limit)


async def get_quota_limit_for_user(
    store: RoutingStore,
    user_id: str,
    default_quota_minutes: Optional[int] = None,
    now: Optional[datetime] = None,
) -> int:
    """
    Resolve the monthly voice quota for a user.

    Args:
        store: Store exposing the quota table
        user_id: Opaque user identifier
        default_quota_minutes: Already-parsed default (defaults to RouterConfig value)
        now: Reference time for expiry checks (defaults to current UTC time, naive values are UTC)

    Returns:
        Positive integer minutes. Never raises for store failures.
    """
    if default_quota_minutes is None:
        default_quota_minutes = get_config().default_voice_quota_minutes
    now = _as_utc(now) if now else datetime.now(timezone.utc)

    try:
        row = await store.select_single(QUOTA_TABLE, QUOTA_COLUMNS, {"user_id": user_id})
    except Exception as e:
        logger.warning(
            "quota_lookup_failed",
            user_id=user_id[:8],
            error=str(e)
        )
        return default_quota_minutes

    if not row:
        return default_quota_minutes

    override = _override_minutes(row, now)
    if override is None:
        logger.debug(
            "quota_override_ignored",
            user_id=user_id[:8],
            monthly_minutes_limit=row.get("monthly_minutes_limit"),
            expires_at=row.get("expires_at")
        )
        return default_quota_minutes

    logger.debug("quota_override_applied", user_id=user_id[:8], minutes=override)
    return override


def evaluate_quota(minutes_used: float, quota_limit: int) -> QuotaStatus:
    """
    Compare voice usage with the resolved quota.

    Usage at or above the limit is denied. Usage at or above
    QUOTA_WARNING_RATIO of the limit carries a warning message.
    """
    minutes_used = max(0.0, float(minutes_used or 0))
    remaining = max(0.0, quota_limit - minutes_used)

    warning = None
    if minutes_used >= quota_limit * QUOTA_WARNING_RATIO:
        warning = f"You've used {minutes_used:.1f} of {quota_limit} minutes this month."

    return QuotaStatus(
        allowed=minutes_used < quota_limit,
        minutes_used=minutes_used,
        quota_limit=quota_limit,
        remaining_minutes=remaining,
        warning=warning,
    )
