"""Event types reported by the Netatmo security API and webhook."""

from __future__ import annotations

from enum import StrEnum

from pynacap.models.module_type import ModuleType


class EventType(StrEnum):
    """API event names.

    Strings without a mapped member resolve to :attr:`UNKNOWN`.
    """

    UNKNOWN = "unknown"
    PERSON = "person"
    PERSON_AWAY = "person_away"
    PERSON_HOME = "person_home"
    MOVEMENT = "movement"
    HUMAN = "human"
    ANIMAL = "animal"
    VEHICLE = "vehicle"
    OUTDOOR = "outdoor"
    CONNECTION = "connection"
    DISCONNECTION = "disconnection"
    ON = "on"
    OFF = "off"
    BOOT = "boot"
    SD = "sd"
    ALIM = "alim"
    DAILY_SUMMARY = "daily_summary"
    NEW_MODULE = "new_module"
    MODULE_CONNECT = "module_connect"
    MODULE_DISCONNECT = "module_disconnect"
    MODULE_LOW_BATTERY = "module_low_battery"
    MODULE_END_UPDATE = "module_end_update"
    TAG_BIG_MOVE = "tag_big_move"
    TAG_SMALL_MOVE = "tag_small_move"
    TAG_UNINSTALLED = "tag_uninstalled"
    TAG_OPEN = "tag_open"
    SIREN_SOUNDING = "siren_sounding"
    SIREN_TAMPERED = "siren_tampered"
    INCOMING_CALL = "incoming_call"
    ACCEPTED_CALL = "accepted_call"
    MISSED_CALL = "missed_call"
    HUSH = "hush"
    SMOKE = "smoke"
    TAMPERED = "tampered"
    WIFI_STATUS = "wifi_status"
    BATTERY_STATUS = "battery_status"
    DETECTION_CHAMBER_STATUS = "detection_chamber_status"
    SOUND_TEST = "sound_test"
    CO_DETECTED = "co_detected"

    @classmethod
    def _missing_(cls, value: object) -> EventType:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return cls.UNKNOWN

    @property
    def applies_to(self) -> frozenset[ModuleType]:
        return _APPLIES_TO.get(self, frozenset())

    def valid_for(self, module_type: ModuleType) -> bool:
        """Whether a module of *module_type* can emit this event."""
        return module_type in self.applies_to


_CAMERAS = frozenset({ModuleType.WELCOME, ModuleType.PRESENCE, ModuleType.DOORBELL})
_ALARMS = frozenset({ModuleType.SMOKE_DETECTOR, ModuleType.CO_DETECTOR})

_APPLIES_TO: dict[EventType, frozenset[ModuleType]] = {
    EventType.PERSON: frozenset({ModuleType.WELCOME, ModuleType.PERSON}),
    EventType.PERSON_AWAY: frozenset({ModuleType.WELCOME, ModuleType.PERSON}),
    EventType.PERSON_HOME: frozenset({ModuleType.WELCOME, ModuleType.PERSON}),
    EventType.MOVEMENT: frozenset({ModuleType.WELCOME, ModuleType.PRESENCE}),
    EventType.HUMAN: frozenset({ModuleType.PRESENCE, ModuleType.DOORBELL}),
    EventType.ANIMAL: frozenset({ModuleType.PRESENCE}),
    EventType.VEHICLE: frozenset({ModuleType.PRESENCE}),
    EventType.OUTDOOR: frozenset({ModuleType.PRESENCE}),
    EventType.CONNECTION: _CAMERAS,
    EventType.DISCONNECTION: _CAMERAS,
    EventType.ON: frozenset({ModuleType.WELCOME, ModuleType.PRESENCE}),
    EventType.OFF: frozenset({ModuleType.WELCOME, ModuleType.PRESENCE}),
    EventType.BOOT: _CAMERAS,
    EventType.SD: frozenset({ModuleType.WELCOME, ModuleType.PRESENCE}),
    EventType.ALIM: frozenset({ModuleType.WELCOME, ModuleType.PRESENCE}),
    EventType.DAILY_SUMMARY: frozenset({ModuleType.WELCOME}),
    EventType.NEW_MODULE: frozenset({ModuleType.WELCOME}),
    EventType.MODULE_CONNECT: frozenset({ModuleType.WELCOME}),
    EventType.MODULE_DISCONNECT: frozenset({ModuleType.WELCOME}),
    EventType.MODULE_LOW_BATTERY: frozenset({ModuleType.WELCOME}),
    EventType.MODULE_END_UPDATE: frozenset({ModuleType.WELCOME}),
    EventType.TAG_BIG_MOVE: frozenset({ModuleType.TAG}),
    EventType.TAG_SMALL_MOVE: frozenset({ModuleType.TAG}),
    EventType.TAG_UNINSTALLED: frozenset({ModuleType.TAG}),
    EventType.TAG_OPEN: frozenset({ModuleType.TAG}),
    EventType.SIREN_SOUNDING: frozenset({ModuleType.SIREN, ModuleType.WELCOME}),
    EventType.SIREN_TAMPERED: frozenset({ModuleType.SIREN}),
    EventType.INCOMING_CALL: frozenset({ModuleType.DOORBELL}),
    EventType.ACCEPTED_CALL: frozenset({ModuleType.DOORBELL}),
    EventType.MISSED_CALL: frozenset({ModuleType.DOORBELL}),
    EventType.HUSH: _ALARMS,
    EventType.SMOKE: frozenset({ModuleType.SMOKE_DETECTOR}),
    EventType.TAMPERED: _ALARMS,
    EventType.WIFI_STATUS: _ALARMS,
    EventType.BATTERY_STATUS: _ALARMS,
    EventType.DETECTION_CHAMBER_STATUS: frozenset({ModuleType.SMOKE_DETECTOR}),
    EventType.SOUND_TEST: _ALARMS,
    EventType.CO_DETECTED: frozenset({ModuleType.CO_DETECTOR}),
}
