"""pynacap - Capability layer for Netatmo home-automation things."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynacap")
except PackageNotFoundError:
    __version__ = "0+local"
from pynacap.capability import Capability, CapabilityMap, Command, RefreshCapability
from pynacap.config import NacapConfig
from pynacap.exceptions import NacapConfigError, NacapError, ThingRegistryError
from pynacap.handler import CommonInterface, DeviceHandler, ThingRegistry
from pynacap.models import (
    Device,
    Event,
    EventType,
    HomeData,
    HomeEvent,
    HomeStatus,
    HomeStatusModule,
    ModuleType,
    NAError,
    NAMain,
    NAObject,
    NAThing,
    UpdateKind,
    WebhookEvent,
    classify,
)
from pynacap.thing import Thing, ThingStatus

__all__ = [
    "__version__",
    "Capability",
    "CapabilityMap",
    "Command",
    "CommonInterface",
    "Device",
    "DeviceHandler",
    "Event",
    "EventType",
    "HomeData",
    "HomeEvent",
    "HomeStatus",
    "HomeStatusModule",
    "ModuleType",
    "NAError",
    "NAMain",
    "NAObject",
    "NAThing",
    "NacapConfig",
    "NacapConfigError",
    "NacapError",
    "RefreshCapability",
    "Thing",
    "ThingRegistry",
    "ThingRegistryError",
    "ThingStatus",
    "UpdateKind",
    "WebhookEvent",
    "classify",
]
