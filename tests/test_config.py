from __future__ import annotations

import dataclasses

import pytest

from pyrtti._constants import API_BASE, REQUEST_TIMEOUT_S
from pyrtti.config import ExhaustionPolicy, MissingKeyPolicy, RttiConfig
from pyrtti.exceptions import RttiConfigError

_ENV_KEYS = (
    "RTTI_API_KEY",
    "RTTI_CUSTOM_RELAY",
    "RTTI_SIMULATION",
    "RTTI_BASE_URL",
    "RTTI_REQUEST_TIMEOUT",
    "RTTI_EXHAUSTION_POLICY",
    "RTTI_MISSING_KEY_POLICY",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = RttiConfig()

    assert config.credential is None
    assert config.relay_template == ""
    assert config.simulation is False
    assert config.base_url == API_BASE
    assert config.request_timeout == REQUEST_TIMEOUT_S == 10.0
    assert config.exhaustion_policy is ExhaustionPolicy.SIMULATE
    assert config.missing_key_policy is MissingKeyPolicy.SIMULATE


def test_credential_strips_blank_keys() -> None:
    assert RttiConfig(api_key="   ").credential is None
    assert RttiConfig(api_key=" abc ").credential == "abc"


def test_policies_accept_strings() -> None:
    config = RttiConfig(exhaustion_policy="RAISE", missing_key_policy="empty")  # type: ignore[arg-type]

    assert config.exhaustion_policy is ExhaustionPolicy.RAISE
    assert config.missing_key_policy is MissingKeyPolicy.EMPTY


def test_invalid_policy_rejected() -> None:
    with pytest.raises(RttiConfigError, match="exhaustion_policy"):
        RttiConfig(exhaustion_policy="retry")  # type: ignore[arg-type]


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(RttiConfigError):
        RttiConfig(request_timeout=0)


def test_config_is_immutable() -> None:
    config = RttiConfig(api_key="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"  # type: ignore[misc]


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RTTI_API_KEY", "KEY")
    monkeypatch.setenv("RTTI_CUSTOM_RELAY", "https://relay.example/?u=")
    monkeypatch.setenv("RTTI_SIMULATION", "yes")
    monkeypatch.setenv("RTTI_REQUEST_TIMEOUT", "3.5")
    monkeypatch.setenv("RTTI_EXHAUSTION_POLICY", "raise")
    monkeypatch.setenv("RTTI_MISSING_KEY_POLICY", "empty")

    config = RttiConfig.from_env()

    assert config.credential == "KEY"
    assert config.relay_template == "https://relay.example/?u="
    assert config.simulation is True
    assert config.request_timeout == 3.5
    assert config.exhaustion_policy is ExhaustionPolicy.RAISE
    assert config.missing_key_policy is MissingKeyPolicy.EMPTY


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RTTI_API_KEY", "ENV")
    monkeypatch.setenv("RTTI_SIMULATION", "1")
    monkeypatch.setenv("RTTI_REQUEST_TIMEOUT", "3")

    config = RttiConfig.from_env(api_key="ARG", simulation=False, request_timeout=7.0)

    assert config.credential == "ARG"
    assert config.simulation is False
    assert config.request_timeout == 7.0


def test_from_env_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RTTI_REQUEST_TIMEOUT", "soon")
    with pytest.raises(RttiConfigError):
        RttiConfig.from_env()
