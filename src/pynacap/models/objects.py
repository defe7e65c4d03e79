"""API object models.

The class hierarchy mirrors the shape of Netatmo payloads. A payload can
be several things at once: a weather station reading is a thing, a
device and a main station, so :class:`NAMain` inherits all three facets.
:mod:`pynacap.models.kinds` turns that hierarchy into dispatch flags.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pynacap.ingestion.normalize import safe_bool, safe_int, safe_str
from pynacap.models._base import NABaseModel, NATimestamp
from pynacap.models.event_type import EventType
from pynacap.models.module_type import ModuleType


class NAObject(NABaseModel):
    """Anything the API identifies with an ``id``."""

    id: str = ""
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return safe_str(value) or ""


class NAError(NAObject):
    """An error reported by the API for a request or a single module."""

    code: int | None = None
    message: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> int | None:
        return safe_int(value)


# ------------------------------------------------------------------
# Things
# ------------------------------------------------------------------


class NAThing(NAObject):
    """A home, module or device the API reports state for."""

    type: str = ""
    """API module type string (e.g. ``"NAMain"``)."""
    firmware: str | None = Field(default=None, validation_alias=AliasChoices("firmware_revision", "firmware"))
    reachable: bool | None = None
    """``None`` when the API does not report reachability for this module."""
    bridge: str | None = None
    """Id of the module this one is paired through."""
    last_seen: NATimestamp = Field(default=None, validation_alias=AliasChoices("last_seen", "last_status_store"))
    radio_status: int | None = Field(default=None, validation_alias=AliasChoices("rf_status", "radio_status"))
    wifi_status: int | None = None

    @property
    def is_reachable(self) -> bool:
        """Unreported reachability counts as reachable."""
        return self.reachable is None or self.reachable

    @property
    def module_type(self) -> ModuleType:
        return ModuleType.from_api_name(self.type)

    @field_validator("firmware", mode="before")
    @classmethod
    def _coerce_firmware(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("reachable", mode="before")
    @classmethod
    def _coerce_reachable(cls, value: Any) -> bool | None:
        return safe_bool(value)

    @field_validator("radio_status", "wifi_status", mode="before")
    @classmethod
    def _coerce_signal(cls, value: Any) -> int | None:
        return safe_int(value)


class Device(NAThing):
    """A physical device registered on the account."""

    date_setup: NATimestamp = None
    modules: list[Any] = Field(default_factory=list)
    place: dict[str, Any] = Field(default_factory=dict)


class NAMain(Device):
    """A weather station main module with its readings."""

    station_name: str | None = None
    read_only: bool | None = None
    dashboard_data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("read_only", mode="before")
    @classmethod
    def _coerce_read_only(cls, value: Any) -> bool | None:
        return safe_bool(value)


class HomeData(NAThing):
    """Static topology of a home (``homesdata``)."""

    timezone: str | None = None
    country: str | None = None
    altitude: int | None = None
    coordinates: list[float] = Field(default_factory=list)
    rooms: list[dict[str, Any]] = Field(default_factory=list)
    modules: list[dict[str, Any]] = Field(default_factory=list)
    persons: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("altitude", mode="before")
    @classmethod
    def _coerce_altitude(cls, value: Any) -> int | None:
        return safe_int(value)


class HomeStatus(NAThing):
    """Live state of a home (``homestatus``)."""

    rooms: list[dict[str, Any]] = Field(default_factory=list)
    modules: list[dict[str, Any]] = Field(default_factory=list)
    persons: list[dict[str, Any]] = Field(default_factory=list)


class HomeStatusModule(NAThing):
    """One module entry of a ``homestatus`` response."""

    status: str | None = None
    monitoring: str | None = None
    sd_status: int | None = None
    alim_status: int | None = None
    boiler_status: bool | None = None
    battery_state: str | None = None

    @field_validator("sd_status", "alim_status", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("boiler_status", mode="before")
    @classmethod
    def _coerce_boiler(cls, value: Any) -> bool | None:
        return safe_bool(value)


# ------------------------------------------------------------------
# Events
# ------------------------------------------------------------------


class Event(NAObject):
    """Something that happened on a module at a point in time."""

    event_type: EventType = Field(default=EventType.UNKNOWN, validation_alias=AliasChoices("type", "event_type"))
    time: NATimestamp = None
    camera_id: str | None = None
    person_id: str | None = None
    sub_type: int | None = None
    message: str | None = None

    @field_validator("event_type", mode="before")
    @classmethod
    def _coerce_event_type(cls, value: Any) -> EventType:
        if isinstance(value, EventType):
            return value
        return EventType(value) if isinstance(value, str) else EventType.UNKNOWN

    @field_validator("sub_type", mode="before")
    @classmethod
    def _coerce_sub_type(cls, value: Any) -> int | None:
        return safe_int(value)


class HomeEvent(Event):
    """An event from the ``getevents`` history, with its media."""

    snapshot: dict[str, Any] = Field(default_factory=dict)
    vignette: dict[str, Any] = Field(default_factory=dict)
    video_id: str | None = None
    video_status: str | None = None
    subevents: list[dict[str, Any]] = Field(default_factory=list)


class WebhookEvent(Event):
    """An event pushed to the registered webhook."""

    home_id: str | None = None
    device_id: str | None = None
    push_type: str | None = None
    persons: list[dict[str, Any]] = Field(default_factory=list)
    snapshot_url: str | None = None
    vignette_url: str | None = None
