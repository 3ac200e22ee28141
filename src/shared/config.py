"""
Centralized configuration for the chat router and translation pipeline.
Secure-by-default: API keys MUST be explicitly configured.

This module is the single place that reads the process environment. Components
such as the quota resolver receive already-parsed values from here, so they
stay testable without environment mutation.
"""
import os
import sys
from dataclasses import dataclass, field
from typing import Optional, List


# Documented fallback when VOICE_DEFAULT_QUOTA_MINUTES is absent or invalid
DEFAULT_VOICE_QUOTA_MINUTES = 30

DEFAULT_CHAT_RATE_LIMIT = 20
DEFAULT_CHAT_RATE_LIMIT_WINDOW_SECONDS = 60


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def assert_required_api_key(key_name: str, key_value: Optional[str]) -> None:
    """
    Fail fast when a required API key is empty or whitespace-only.

    Args:
        key_name: Environment variable name, used in the error message
        key_value: Value to check

    Raises:
        ConfigurationError: If the value is missing or blank
    """
    if not key_value or not key_value.strip():
        raise ConfigurationError(
            f"{key_name} is required but not set.\n"
            f"  Set via environment variable: export {key_name}='...'"
        )


def parse_positive_int(raw: Optional[str], fallback: int) -> int:
    """Parse an integer override, falling back when unparsable or <= 0."""
    if raw is None:
        return fallback
    try:
        value = int(str(raw).strip())
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def resolve_default_quota_minutes(raw: Optional[str] = None) -> int:
    """
    Resolve the default monthly voice quota in minutes.

    Args:
        raw: Raw override value (defaults to VOICE_DEFAULT_QUOTA_MINUTES env var)

    Returns:
        Positive integer minutes, DEFAULT_VOICE_QUOTA_MINUTES when invalid
    """
    if raw is None:
        raw = os.environ.get("VOICE_DEFAULT_QUOTA_MINUTES")
    return parse_positive_int(raw, DEFAULT_VOICE_QUOTA_MINUTES)


@dataclass
class RouterConfig:
    """
    Configuration container with validation.

    Configuration Precedence (highest to lowest):
    1. Explicit constructor arguments (tests, CLI wiring)
    2. Environment Variables
    3. Code Defaults (only for non-sensitive, optional values)
    """

    # =========================================================================
    # REQUIRED - No defaults, fail fast if missing
    # =========================================================================

    supabase_url: str = field(default_factory=lambda: os.environ.get("SUPABASE_URL", ""))
    supabase_service_role_key: str = field(default_factory=lambda: os.environ.get("SUPABASE_SERVICE_ROLE_KEY", ""))
    openai_api_key: str = field(default_factory=lambda: os.environ.get("OPENAI_API_KEY", ""))

    # =========================================================================
    # OPTIONAL - Sensible defaults
    # =========================================================================

    chat_rate_limit: int = field(default_factory=lambda: parse_positive_int(
        os.environ.get("CHAT_RATE_LIMIT"), DEFAULT_CHAT_RATE_LIMIT))
    chat_rate_limit_window_seconds: int = field(default_factory=lambda: parse_positive_int(
        os.environ.get("CHAT_RATE_LIMIT_WINDOW_SECONDS"), DEFAULT_CHAT_RATE_LIMIT_WINDOW_SECONDS))
    default_voice_quota_minutes: int = field(default_factory=resolve_default_quota_minutes)
    store_timeout_seconds: float = field(default_factory=lambda: float(os.environ.get("STORE_TIMEOUT_SECONDS", "3.0")))

    def rate_limit_config(self):
        """Build the per-user chat rate limit from configured values."""
        from chat_router.rate_limiter import RateLimitConfig

        return RateLimitConfig(
            limit=self.chat_rate_limit,
            window_seconds=self.chat_rate_limit_window_seconds,
        )

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, require_openai: bool = True) -> List[str]:
        """
        Validate configuration and return list of errors.
        Call at service startup to fail fast with clear errors.

        Args:
            require_openai: Whether OPENAI_API_KEY is required (chat and translation do)

        Returns:
            List of error messages (empty if valid)
        """
        required = [
            ("SUPABASE_URL", self.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", self.supabase_service_role_key),
        ]
        if require_openai:
            required.append(("OPENAI_API_KEY", self.openai_api_key))

        errors = []
        for key_name, key_value in required:
            try:
                assert_required_api_key(key_name, key_value)
            except ConfigurationError as e:
                errors.append(str(e))
        return errors

    def validate_or_raise(self, require_openai: bool = True) -> None:
        """Validate configuration and raise ConfigurationError listing every problem."""
        errors = self.validate(require_openai)
        if errors:
            raise ConfigurationError("\n".join(errors))

    def validate_or_exit(self, service_name: str = "chat-router", require_openai: bool = True):
        """Validate configuration and exit with clear error if invalid."""
        errors = self.validate(require_openai)
        if errors:
            print(f"\n{'='*60}", file=sys.stderr)
            print(f"CONFIGURATION ERROR - {service_name} cannot start", file=sys.stderr)
            print(f"{'='*60}\n", file=sys.stderr)
            for i, error in enumerate(errors, 1):
                print(f"{i}. {error}\n", file=sys.stderr)
            print(f"{'='*60}", file=sys.stderr)
            print("Fix the above issues and restart the service.", file=sys.stderr)
            print(f"{'='*60}\n", file=sys.stderr)
            sys.exit(1)


# Singleton instance
config = RouterConfig()


def get_config() -> RouterConfig:
    """Get the singleton config instance."""
    return config
