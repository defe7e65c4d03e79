"""Structural classification of API objects.

One object may carry several kinds at once, so dispatch tests each flag
on its own instead of switching on a single type.
"""

from __future__ import annotations

import enum
from typing import Any

from pynacap.models.objects import (
    Device,
    Event,
    HomeData,
    HomeEvent,
    HomeStatus,
    HomeStatusModule,
    NAError,
    NAMain,
    NAThing,
    WebhookEvent,
)


class UpdateKind(enum.Flag):
    """Facets an incoming object can expose to capabilities."""

    NONE = 0
    ERROR = enum.auto()
    HOME_DATA = enum.auto()
    HOME_STATUS = enum.auto()
    HOME_STATUS_MODULE = enum.auto()
    HOME_EVENT = enum.auto()
    WEBHOOK_EVENT = enum.auto()
    EVENT = enum.auto()
    THING = enum.auto()
    MAIN_DEVICE = enum.auto()
    DEVICE = enum.auto()


_KIND_BY_CLASS: tuple[tuple[type, UpdateKind], ...] = (
    (NAError, UpdateKind.ERROR),
    (HomeData, UpdateKind.HOME_DATA),
    (HomeStatus, UpdateKind.HOME_STATUS),
    (HomeStatusModule, UpdateKind.HOME_STATUS_MODULE),
    (HomeEvent, UpdateKind.HOME_EVENT),
    (WebhookEvent, UpdateKind.WEBHOOK_EVENT),
    (Event, UpdateKind.EVENT),
    (NAThing, UpdateKind.THING),
    (NAMain, UpdateKind.MAIN_DEVICE),
    (Device, UpdateKind.DEVICE),
)


def classify(obj: Any) -> UpdateKind:
    """Return every kind *obj* matches; :attr:`UpdateKind.NONE` for foreign objects."""
    kinds = UpdateKind.NONE
    for cls, kind in _KIND_BY_CLASS:
        if isinstance(obj, cls):
            kinds |= kind
    return kinds
