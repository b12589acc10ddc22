"""Tests for environment configuration."""

import importlib

import pytest

from near_keys import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):
    """Reload the config module, restoring the default afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.delenv("NEAR_KEYS_DEFAULT_CURVE", raising=False)
    importlib.reload(config)


def test_default_curve() -> None:
    assert config.DEFAULT_CURVE == "ed25519"


def test_env_override_is_lowercased(monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
    monkeypatch.setenv("NEAR_KEYS_DEFAULT_CURVE", "ED25519")
    assert reload_config().DEFAULT_CURVE == "ed25519"


def test_unsupported_curve_rejected(monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
    monkeypatch.setenv("NEAR_KEYS_DEFAULT_CURVE", "secp256k1")
    with pytest.raises(ValueError, match="Supported values: \\['ed25519'\\]"):
        reload_config()
