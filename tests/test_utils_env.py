"""Tests for the environment variable utility."""

import pytest

from ipmonitor.utils.env import EnvVarTypeError, env_is_set, get_env


def test_get_env_basic(monkeypatch):
    """Test getting set variables and missing variables with defaults."""
    monkeypatch.setenv("IPMONITOR_TEST_VAR", "test_value")
    monkeypatch.delenv("IPMONITOR_MISSING_VAR", raising=False)

    assert get_env("IPMONITOR_TEST_VAR") == "test_value"
    assert get_env("IPMONITOR_MISSING_VAR", default="default") == "default"
    assert get_env("IPMONITOR_MISSING_VAR") is None


def test_get_env_coercion(monkeypatch):
    """Test type coercion for common types."""
    monkeypatch.setenv("IPMONITOR_BOOL_TRUE", "true")
    monkeypatch.setenv("IPMONITOR_BOOL_FALSE", "off")
    monkeypatch.setenv("IPMONITOR_INT", "123")
    monkeypatch.setenv("IPMONITOR_FLOAT", "0.5")

    assert get_env("IPMONITOR_BOOL_TRUE", default=False, as_type=bool) is True
    assert get_env("IPMONITOR_BOOL_FALSE", default=True, as_type=bool) is False
    assert get_env("IPMONITOR_INT", default=0, as_type=int) == 123
    assert get_env("IPMONITOR_FLOAT", default=0.0, as_type=float) == 0.5


def test_get_env_coercion_failure(monkeypatch):
    monkeypatch.setenv("IPMONITOR_INVALID_INT", "not_an_int")
    with pytest.raises(EnvVarTypeError, match="IPMONITOR_INVALID_INT"):
        get_env("IPMONITOR_INVALID_INT", default=0, as_type=int)


def test_env_is_set(monkeypatch):
    monkeypatch.setenv("IPMONITOR_EMPTY", "")
    monkeypatch.setenv("IPMONITOR_FULL", "x")

    assert not env_is_set("IPMONITOR_EMPTY")
    assert env_is_set("IPMONITOR_FULL")
