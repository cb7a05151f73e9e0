"""Client configuration for pyrtti."""

from __future__ import annotations

import dataclasses
import enum
import os
from typing import Any

from pyrtti._constants import API_BASE, REQUEST_TIMEOUT_S
from pyrtti.exceptions import RttiConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


class ExhaustionPolicy(str, enum.Enum):
    """What ``get_buses`` does once every relay strategy has failed."""

    SIMULATE = "simulate"
    """Return the synthetic fleet for the requested route(s)."""
    RAISE = "raise"
    """Raise :class:`~pyrtti.exceptions.RttiChainExhaustedError`."""


class MissingKeyPolicy(str, enum.Enum):
    """What ``get_buses`` does when no API key is configured."""

    SIMULATE = "simulate"
    """Behave as if simulation mode were enabled."""
    EMPTY = "empty"
    """Return an empty list without touching the network."""


def _policy(enum_cls: type[enum.Enum], value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in enum_cls)
        raise RttiConfigError(f"{field_name} must be one of: {choices} (got {value!r})") from exc


@dataclasses.dataclass(frozen=True)
class RttiConfig:
    """Client configuration.

    A config is an immutable snapshot: the client reads it once at the
    start of every fetch. Use :meth:`RttiClient.update_config` (or
    :func:`dataclasses.replace`) to change settings between fetches.

    Parameters
    ----------
    api_key : str or None
        RTTI API key. ``None`` or blank means "not configured".
    custom_relay : str
        Optional relay URL template tried before the built-in relays.
        Either contains a ``{url}`` placeholder or the encoded target
        URL is appended to it.
    simulation : bool
        Serve the synthetic fleet instead of live data.
    base_url : str
        RTTI API base URL.
    request_timeout : float
        Per-relay request timeout in seconds.
    exhaustion_policy : ExhaustionPolicy
        Behaviour once every relay has failed. Defaults to
        ``SIMULATE``.
    missing_key_policy : MissingKeyPolicy
        Behaviour when ``api_key`` is not set. Defaults to
        ``SIMULATE``.
    """

    api_key: str | None = None
    custom_relay: str = ""
    simulation: bool = False
    base_url: str = API_BASE
    request_timeout: float = REQUEST_TIMEOUT_S
    exhaustion_policy: ExhaustionPolicy = ExhaustionPolicy.SIMULATE
    missing_key_policy: MissingKeyPolicy = MissingKeyPolicy.SIMULATE

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "exhaustion_policy",
            _policy(ExhaustionPolicy, self.exhaustion_policy, "exhaustion_policy"),
        )
        object.__setattr__(
            self,
            "missing_key_policy",
            _policy(MissingKeyPolicy, self.missing_key_policy, "missing_key_policy"),
        )
        if self.request_timeout <= 0:
            raise RttiConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @property
    def credential(self) -> str | None:
        """The API key, or ``None`` when unset or blank."""
        if self.api_key is None:
            return None
        key = self.api_key.strip()
        return key or None

    @property
    def relay_template(self) -> str:
        """The custom relay template with surrounding whitespace removed."""
        return self.custom_relay.strip()

    @classmethod
    def from_env(cls, **overrides: Any) -> RttiConfig:
        """Create configuration from environment variables.

        Reads ``RTTI_API_KEY``, ``RTTI_CUSTOM_RELAY``, ``RTTI_SIMULATION``,
        ``RTTI_BASE_URL``, ``RTTI_REQUEST_TIMEOUT``,
        ``RTTI_EXHAUSTION_POLICY`` and ``RTTI_MISSING_KEY_POLICY``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "RTTI_API_KEY": "api_key",
            "RTTI_CUSTOM_RELAY": "custom_relay",
            "RTTI_BASE_URL": "base_url",
            "RTTI_EXHAUSTION_POLICY": "exhaustion_policy",
            "RTTI_MISSING_KEY_POLICY": "missing_key_policy",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "simulation" not in overrides:
            config_kwargs["simulation"] = _env_bool(env.get("RTTI_SIMULATION"), False)

        timeout_env = env.get("RTTI_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise RttiConfigError(f"RTTI_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
