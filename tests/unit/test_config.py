"""
Unit tests for RouterConfig and the configuration helpers.

Tests API key guarding, integer overrides, the default voice quota, and
startup validation.
"""
import pytest

import sys
sys.path.insert(0, 'src')

from shared.config import (
    DEFAULT_VOICE_QUOTA_MINUTES,
    ConfigurationError,
    RouterConfig,
    assert_required_api_key,
    get_config,
    parse_positive_int,
    resolve_default_quota_minutes,
)


def _valid_config(**overrides):
    values = {
        "supabase_url": "https://example.supabase.co",
        "supabase_service_role_key": "service-key",
        "openai_api_key": "sk-test",
    }
    values.update(overrides)
    return RouterConfig(**values)


# =============================================================================
# Test assert_required_api_key
# =============================================================================

class TestAssertRequiredApiKey:
    """Tests for assert_required_api_key()."""

    def test_accepts_non_empty(self):
        assert assert_required_api_key("OPENAI_API_KEY", "sk-test") is None

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_rejects_blank(self, value):
        with pytest.raises(ConfigurationError):
            assert_required_api_key("OPENAI_API_KEY", value)

    def test_error_names_the_key(self):
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            assert_required_api_key("OPENAI_API_KEY", "")


# =============================================================================
# Test Integer Overrides
# =============================================================================

class TestParsePositiveInt:
    """Tests for parse_positive_int()."""

    @pytest.mark.parametrize("raw,expected", [
        (None, 7),
        ("", 7),
        ("abc", 7),
        ("0", 7),
        ("-3", 7),
        ("12.5", 7),
        ("45", 45),
        (" 45 ", 45),
    ])
    def test_parse(self, raw, expected):
        assert parse_positive_int(raw, 7) == expected


class TestResolveDefaultQuotaMinutes:
    """Tests for resolve_default_quota_minutes()."""

    def test_explicit_value(self):
        assert resolve_default_quota_minutes("60") == 60

    def test_invalid_explicit_value(self):
        assert resolve_default_quota_minutes("unlimited") == DEFAULT_VOICE_QUOTA_MINUTES

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("VOICE_DEFAULT_QUOTA_MINUTES", "90")
        assert resolve_default_quota_minutes() == 90

    def test_missing_environment(self, monkeypatch):
        monkeypatch.delenv("VOICE_DEFAULT_QUOTA_MINUTES", raising=False)
        assert resolve_default_quota_minutes() == 30

    def test_non_positive_environment(self, monkeypatch):
        monkeypatch.setenv("VOICE_DEFAULT_QUOTA_MINUTES", "0")
        assert resolve_default_quota_minutes() == 30


# =============================================================================
# Test RouterConfig
# =============================================================================

class TestRouterConfig:
    """Tests for RouterConfig."""

    def test_environment_defaults(self, monkeypatch):
        for name in ("CHAT_RATE_LIMIT", "CHAT_RATE_LIMIT_WINDOW_SECONDS",
                     "VOICE_DEFAULT_QUOTA_MINUTES", "STORE_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        config = RouterConfig()

        assert config.chat_rate_limit == 20
        assert config.chat_rate_limit_window_seconds == 60
        assert config.default_voice_quota_minutes == 30
        assert config.store_timeout_seconds == 3.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
        monkeypatch.setenv("CHAT_RATE_LIMIT", "5")
        monkeypatch.setenv("CHAT_RATE_LIMIT_WINDOW_SECONDS", "bogus")

        config = RouterConfig()

        assert config.supabase_url == "https://env.supabase.co"
        assert config.chat_rate_limit == 5
        assert config.chat_rate_limit_window_seconds == 60

    def test_rate_limit_config(self):
        rate_limit = _valid_config(chat_rate_limit=3, chat_rate_limit_window_seconds=10).rate_limit_config()
        assert rate_limit.limit == 3
        assert rate_limit.window_seconds == 10

    def test_get_config_is_singleton(self):
        assert get_config() is get_config()


class TestValidation:
    """Startup validation."""

    def test_valid(self):
        assert _valid_config().validate() == []

    def test_reports_every_missing_key(self):
        errors = RouterConfig(supabase_url="", supabase_service_role_key=" ", openai_api_key="").validate()
        assert len(errors) == 3

    def test_openai_optional(self):
        assert _valid_config(openai_api_key="").validate(require_openai=False) == []

    def test_validate_or_raise(self):
        with pytest.raises(ConfigurationError, match="SUPABASE_SERVICE_ROLE_KEY"):
            _valid_config(supabase_service_role_key="").validate_or_raise()

    def test_validate_or_raise_passes(self):
        _valid_config().validate_or_raise()

    def test_validate_or_exit(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _valid_config(openai_api_key="").validate_or_exit("translate-recipes")

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "translate-recipes cannot start" in err
        assert "OPENAI_API_KEY" in err
