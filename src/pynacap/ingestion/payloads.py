"""Raw payload parsing.

Parsers return ``None`` for payloads that do not have the expected shape;
they never raise on bad input.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pynacap._redact import redact_for_log
from pynacap.models.objects import NAError, NAThing, WebhookEvent

_logger = logging.getLogger(__name__)

TThing = TypeVar("TThing", bound=NAThing)


class _ErrorEnvelope(BaseModel):
    """``{"error": {"code": ..., "message": ...}}``"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error: dict[str, Any] = Field(...)


def parse_webhook_event(payload: Any) -> WebhookEvent | None:
    """Parse a webhook push body; ``None`` when it is not an event."""
    if not isinstance(payload, dict) or not payload.get("event_type"):
        return None
    data = dict(payload)
    if "id" not in data and "event_id" in data:
        data["id"] = data["event_id"]
    try:
        return WebhookEvent.model_validate(data)
    except ValidationError:
        _logger.debug("Discarding malformed webhook payload: %s", redact_for_log(payload), exc_info=True)
        return None


def parse_api_error(payload: Any, *, module_id: str = "") -> NAError | None:
    """Extract the error object of an API error response."""
    if not isinstance(payload, dict):
        return None
    try:
        envelope = _ErrorEnvelope.model_validate(payload)
    except ValidationError:
        return None
    data = dict(envelope.error)
    if module_id and "id" not in data:
        data["id"] = module_id
    try:
        return NAError.model_validate(data)
    except ValidationError:
        return None


def parse_thing(payload: Any, model: type[TThing]) -> TThing | None:
    """Validate *payload* as *model*; ``None`` on mismatch."""
    if not isinstance(payload, dict):
        return None
    try:
        return model.model_validate(payload)
    except ValidationError:
        _logger.debug("Payload is not a valid %s: %s", model.__name__, redact_for_log(payload), exc_info=True)
        return None
