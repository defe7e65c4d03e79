"""Module type table.

Every Netatmo thing type maps to one :class:`ModuleType`. A member carries
the API ``type`` string reported for that hardware, the version of its
thing type definition, and whether it is a logical grouping (home, room,
person) rather than a physical module with a radio.
"""

from __future__ import annotations

import enum

from pynacap._constants import BINDING_ID


class ModuleType(enum.Enum):
    """Known module types, keyed by thing type id."""

    UNKNOWN = ("unknown", "", "1", True)
    ACCOUNT = ("account", "", "1", True)
    HOME = ("home", "NAHome", "1", True)
    ROOM = ("room", "NARoom", "1", True)
    PERSON = ("person", "NAPerson", "1", True)
    WELCOME = ("welcome", "NACamera", "1", False)
    TAG = ("tag", "NACamDoorTag", "1", False)
    SIREN = ("siren", "NIS", "1", False)
    PRESENCE = ("presence", "NOC", "2", False)
    DOORBELL = ("doorbell", "NDB", "1", False)
    WEATHER_STATION = ("weather-station", "NAMain", "2", False)
    OUTDOOR = ("outdoor", "NAModule1", "1", False)
    WIND = ("wind", "NAModule2", "1", False)
    RAIN = ("rain", "NAModule3", "1", False)
    INDOOR = ("indoor", "NAModule4", "1", False)
    HOME_COACH = ("home-coach", "NHC", "1", False)
    PLUG = ("plug", "NAPlug", "1", False)
    THERMOSTAT = ("thermostat", "NATherm1", "1", False)
    VALVE = ("valve", "NRV", "1", False)
    SMOKE_DETECTOR = ("smoke-detector", "NSD", "1", False)
    CO_DETECTOR = ("co-detector", "NCO", "1", False)

    def __new__(cls, type_id: str, api_name: str, thing_type_version: str, logical: bool) -> ModuleType:
        obj = object.__new__(cls)
        obj._value_ = type_id
        obj.api_name = api_name
        obj.thing_type_version = thing_type_version
        obj.logical = logical
        return obj

    api_name: str
    thing_type_version: str
    logical: bool

    @property
    def type_id(self) -> str:
        return str(self.value)

    @property
    def name_for_model(self) -> str:
        """Model id advertised for physical modules."""
        return self.name if not self.api_name.strip() else self.api_name

    def is_logical(self) -> bool:
        return self.logical

    def thing_type_uid(self, binding_id: str = BINDING_ID) -> str:
        return f"{binding_id}:{self.type_id}"

    @classmethod
    def from_thing_type_uid(cls, thing_type_uid: str, binding_id: str = BINDING_ID) -> ModuleType:
        """Resolve ``<binding>:<type-id>``.

        Unknown ids, and ids that belong to another binding, map to :attr:`UNKNOWN`.
        """
        binding, _, type_id = thing_type_uid.rpartition(":")
        if binding != binding_id:
            return cls.UNKNOWN
        try:
            return cls(type_id)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def from_api_name(cls, api_name: str | None) -> ModuleType:
        """Resolve an API ``type`` string such as ``"NAMain"``."""
        if not api_name:
            return cls.UNKNOWN
        for member in cls:
            if member.api_name and member.api_name == api_name:
                return member
        return cls.UNKNOWN
