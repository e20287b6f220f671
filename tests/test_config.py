"""Tests for configuration loading."""

import pytest

from eventsink.config import (
    DEFAULT_TLS_CERT,
    DEFAULT_TLS_KEY,
    Credential,
    Settings,
    load_settings,
    parse_bool,
    parse_port,
)
from main import parse_args

ENV_VARS = [
    "EVENTSINK_HOST",
    "EVENTSINK_PORT",
    "EVENTSINK_USE_TLS",
    "EVENTSINK_TLS_CERT",
    "EVENTSINK_TLS_KEY",
    "EVENTSINK_USER",
    "EVENTSINK_PASSWORD",
    "LOG_LEVEL",
    "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty configuration environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self):
        """Test settings with nothing configured."""
        settings = load_settings()

        assert settings.host == "0.0.0.0"
        assert settings.port == 8000
        assert settings.use_tls is False
        assert settings.tls_cert == DEFAULT_TLS_CERT
        assert settings.tls_key == DEFAULT_TLS_KEY
        assert settings.credential is None
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_from_environment(self, monkeypatch):
        """Test reading every variable."""
        monkeypatch.setenv("EVENTSINK_PORT", "9443")
        monkeypatch.setenv("EVENTSINK_USE_TLS", "yes")
        monkeypatch.setenv("EVENTSINK_TLS_CERT", "/tmp/cert.pem")
        monkeypatch.setenv("EVENTSINK_USER", "admin")
        monkeypatch.setenv("EVENTSINK_PASSWORD", "pw")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.port == 9443
        assert settings.use_tls is True
        assert settings.tls_cert == "/tmp/cert.pem"
        assert settings.credential == Credential("admin", "pw")
        assert settings.log_level == "DEBUG"

    def test_invalid_port(self, monkeypatch):
        """Test that a non-numeric port fails at startup."""
        monkeypatch.setenv("EVENTSINK_PORT", "http")
        with pytest.raises(ValueError, match="invalid port"):
            load_settings()


class TestCredential:
    """Tests for the auth credential pair."""

    @pytest.mark.parametrize("username,password", [("admin", ""), ("", "pw"), ("", "")])
    def test_needs_both_parts(self, username, password):
        """Test that the gate stays off unless both parts are set."""
        assert Settings(username=username, password=password).credential is None

    def test_repr_hides_password(self):
        """Test that the password never appears in logs."""
        assert "hunter2" not in repr(Credential("admin", "hunter2"))


class TestParsers:
    """Tests for value parsers."""

    @pytest.mark.parametrize("raw", ["1", "true", "Yes", " on "])
    def test_parse_bool_true(self, raw):
        """Test accepted true spellings."""
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
    def test_parse_bool_false(self, raw):
        """Test accepted false spellings."""
        assert parse_bool(raw) is False

    def test_parse_bool_default(self):
        """Test that unset falls back to the default."""
        assert parse_bool(None, default=True) is True

    def test_parse_bool_invalid(self):
        """Test that unknown spellings are rejected."""
        with pytest.raises(ValueError):
            parse_bool("maybe")

    @pytest.mark.parametrize("raw", ["0", "65536", "-1"])
    def test_parse_port_out_of_range(self, raw):
        """Test port range checks."""
        with pytest.raises(ValueError):
            parse_port(raw)


class TestCommandLine:
    """Tests for command line overrides in main."""

    def test_flags_override_environment(self):
        """Test that flags win over settings from the environment."""
        base = Settings(port=8000, username="env-user", password="env-pw")

        settings = parse_args(
            base, ["--port", "9000", "--use-tls", "--user", "cli", "--password", "pw"]
        )

        assert settings.port == 9000
        assert settings.use_tls is True
        assert settings.credential == Credential("cli", "pw")

    def test_no_flags_keep_settings(self):
        """Test that omitted flags keep environment values."""
        base = Settings(port=8123, use_tls=True, log_level="WARNING")

        assert parse_args(base, []) == base
