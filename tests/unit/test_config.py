"""
Tests for session configuration.
"""
import pytest
from smtembed import SessionConfig
from smtembed.errors import ConfigError


def test_defaults():
    config = SessionConfig()

    assert config.logic is None
    assert config.timeout_ms is None
    assert config.macro_finder is True


def test_from_env():
    config = SessionConfig.from_env({
        "SMTEMBED_LOGIC": "UFLIA",
        "SMTEMBED_TIMEOUT_MS": "2500",
        "SMTEMBED_MACRO_FINDER": "off",
    })

    assert config == SessionConfig(logic="UFLIA", timeout_ms=2500, macro_finder=False)


def test_from_empty_env():
    assert SessionConfig.from_env({}) == SessionConfig()


@pytest.mark.parametrize("env", [
    {"SMTEMBED_TIMEOUT_MS": "soon"},
    {"SMTEMBED_TIMEOUT_MS": "-5"},
    {"SMTEMBED_MACRO_FINDER": "maybe"},
])
def test_invalid_env(env):
    with pytest.raises(ConfigError):
        SessionConfig.from_env(env)


def test_with_overrides():
    config = SessionConfig().with_overrides(timeout_ms=100)

    assert config.timeout_ms == 100
    with pytest.raises(ConfigError):
        SessionConfig().with_overrides(colour="blue")
    with pytest.raises(ConfigError):
        SessionConfig(logic=" ")
