"""Library configuration for pynacap."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pynacap._constants import BINDING_ID, VENDOR
from pynacap.exceptions import NacapConfigError

_logger = logging.getLogger(__name__)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_seconds(name: str, value: str) -> float:
    try:
        seconds = float(value)
    except ValueError as exc:
        _logger.warning("Rejecting configuration: %s=%r is not a number", name, value)
        raise NacapConfigError(f"{name} must be a number of seconds, got {value!r}") from exc
    if seconds < 0:
        _logger.warning("Rejecting configuration: %s=%r is negative", name, value)
        raise NacapConfigError(f"{name} must not be negative, got {seconds}")
    return seconds


@dataclasses.dataclass(frozen=True)
class NacapConfig:
    """Capability layer configuration.

    Parameters
    ----------
    vendor : str
        Vendor name seeded into the properties of physical modules.
    binding_id : str
        Binding segment of thing type UIDs (``<binding_id>:<type-id>``).
    refresh_interval : float
        Seconds a polled reading stays valid. ``0`` leaves refresh
        capabilities in probing mode until the API tells them otherwise.
    trace_payloads : bool
        Log redacted raw payloads at DEBUG level while dispatching.
    """

    vendor: str = VENDOR
    binding_id: str = BINDING_ID
    refresh_interval: float = 0.0
    trace_payloads: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> NacapConfig:
        """Create configuration from ``NACAP_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        NacapConfigError
            When a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "NACAP_VENDOR": "vendor",
            "NACAP_BINDING_ID": "binding_id",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        interval_env = env.get("NACAP_REFRESH_INTERVAL")
        if interval_env is not None and "refresh_interval" not in overrides:
            config_kwargs["refresh_interval"] = _env_seconds("NACAP_REFRESH_INTERVAL", interval_env)

        if "trace_payloads" not in overrides:
            config_kwargs["trace_payloads"] = _env_bool(env.get("NACAP_TRACE_PAYLOADS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
