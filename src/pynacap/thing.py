"""In-memory thing shadow.

A :class:`Thing` is what the platform persists for a device or a logical
grouping: its identity, its property bag and its status.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import InitVar, dataclass, field
from enum import StrEnum
from types import MappingProxyType

_logger = logging.getLogger(__name__)


class ThingStatus(StrEnum):
    UNKNOWN = "unknown"
    ONLINE = "online"
    OFFLINE = "offline"


@dataclass
class Thing:
    """A managed device or logical grouping.

    ``properties`` is read-only; use :meth:`set_properties` to replace the
    stored bag. ``property_writes`` counts those replacements.
    """

    uid: str
    thing_type_uid: str
    bridge_uid: str | None = None
    label: str = ""
    status: ThingStatus = ThingStatus.UNKNOWN
    status_detail: str | None = None
    property_writes: int = 0
    initial_properties: InitVar[Mapping[str, str] | None] = None
    _properties: dict[str, str] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self, initial_properties: Mapping[str, str] | None) -> None:
        if initial_properties:
            self._properties = dict(initial_properties)

    @property
    def api_id(self) -> str:
        """Vendor id of the thing, the last segment of its UID."""
        return self.uid.rpartition(":")[2]

    @property
    def properties(self) -> Mapping[str, str]:
        return MappingProxyType(self._properties)

    def set_properties(self, properties: Mapping[str, str]) -> None:
        self._properties = dict(properties)
        self.property_writes += 1
        _logger.debug("Thing %s properties updated (%d keys)", self.uid, len(self._properties))

    def set_status(self, status: ThingStatus, detail: str | None = None) -> None:
        if status != self.status or detail != self.status_detail:
            _logger.debug("Thing %s status %s -> %s (%s)", self.uid, self.status, status, detail)
        self.status = status
        self.status_detail = detail
