"""Helpers for safe debug logging.

Netatmo payloads carry OAuth tokens and signed media URLs. Snapshot and
vignette links stay readable up to their path, with the signed query
string masked; links whose path itself is a credential (the camera VPN
URL) are masked whole.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlsplit, urlunsplit

_REDACTED = "<redacted>"

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "access_token",
        "refresh_token",
        "client_secret",
        "password",
        "authorization",
        "cookie",
        "vpn_url",
        "key",
    }
)

_URL_KEY_SUFFIX = "_url"


def redact_url(url: str) -> str:
    """Mask the query string and fragment of *url*, keeping host and path."""
    parts = urlsplit(url)
    if not parts.query and not parts.fragment:
        return url
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            parts.path,
            _REDACTED if parts.query else "",
            _REDACTED if parts.fragment else "",
        )
    )


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            lowered = key.lower()
            if lowered in _SENSITIVE_VALUE_KEYS:
                redacted[key] = _REDACTED
            elif lowered.endswith(_URL_KEY_SUFFIX) and isinstance(v, str):
                redacted[key] = redact_for_log(redact_url(v), max_string=max_string, _depth=_depth + 1)
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
