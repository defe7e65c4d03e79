"""Data models for Netatmo API objects."""

from pynacap.models._base import NABaseModel, NATimestamp, parse_na_timestamp
from pynacap.models.event_type import EventType
from pynacap.models.kinds import UpdateKind, classify
from pynacap.models.module_type import ModuleType
from pynacap.models.objects import (
    Device,
    Event,
    HomeData,
    HomeEvent,
    HomeStatus,
    HomeStatusModule,
    NAError,
    NAMain,
    NAObject,
    NAThing,
    WebhookEvent,
)

__all__ = [
    "Device",
    "Event",
    "EventType",
    "HomeData",
    "HomeEvent",
    "HomeStatus",
    "HomeStatusModule",
    "ModuleType",
    "NABaseModel",
    "NAError",
    "NAMain",
    "NAObject",
    "NATimestamp",
    "NAThing",
    "UpdateKind",
    "WebhookEvent",
    "classify",
    "parse_na_timestamp",
]
