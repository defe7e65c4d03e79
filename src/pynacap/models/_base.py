"""Base model for Netatmo API objects.

Every API object inherits from :class:`NABaseModel` which provides:

* A ``model_validator(mode="before")`` that strips placeholder values
  (``""``, ``"--"``, NaN) so the field default is used.
* A ``raw`` dict that captures the original payload.

Timestamps are declared with :data:`NATimestamp`, which accepts epoch
seconds or milliseconds.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from pynacap.ingestion.normalize import normalize_timestamp_seconds

# Strings the API uses for "not available".
_SENTINELS = frozenset({"", "--", "NaN", "nan"})


def parse_na_timestamp(value: Any) -> datetime | None:
    """Convert an epoch timestamp (seconds **or** milliseconds) to a UTC datetime.

    Returns ``None`` when the value is ``None``, non-positive or not numeric.
    """
    if value is None:
        return value
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    ts = normalize_timestamp_seconds(value)
    if ts is None:
        return None
    return datetime.fromtimestamp(ts, tz=UTC)


NATimestamp = Annotated[datetime | None, BeforeValidator(parse_na_timestamp)]
"""Annotated type that coerces epoch ints (seconds or ms) to UTC datetimes."""


class NABaseModel(BaseModel):
    """Base for Netatmo API objects.

    Handles:
    * placeholder values (``""``, ``"--"``, NaN) → dropped so the field
      default is used instead
    * stashes the original API dict in ``raw``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original API payload."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_api_values(cls, values: Any) -> Any:
        """Strip placeholder values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        original = dict(values)
        cleaned = NABaseModel._clean_dict(original)

        # Keep an explicit raw= when constructing from kwargs.
        if "raw" not in values:
            cleaned["raw"] = original
        return cleaned
