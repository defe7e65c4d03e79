"""Thing handlers and their registry.

A handler owns one :class:`~pynacap.thing.Thing` and the capabilities
attached to it. Handlers find their bridge by UID through the
:class:`ThingRegistry` instead of holding a reference to it, so parent and
child handlers never keep each other alive.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pynacap.capability.base import Capability, Command
from pynacap.capability.capability_map import CapabilityMap
from pynacap.capability.refresh import RefreshCapability
from pynacap.config import NacapConfig
from pynacap.exceptions import ThingRegistryError
from pynacap.models.objects import NAObject, NAThing
from pynacap.thing import Thing, ThingStatus

_logger = logging.getLogger(__name__)


class CommonInterface(Protocol):
    """What a capability needs from the handler it is attached to."""

    @property
    def thing(self) -> Thing: ...

    @property
    def config(self) -> NacapConfig: ...

    @property
    def capabilities(self) -> CapabilityMap: ...

    def get_bridge_handler(self) -> CommonInterface | None: ...

    def expire_data(self) -> None: ...

    def proceed_with_update(self) -> None: ...


class ThingRegistry:
    """Handlers indexed by thing UID."""

    def __init__(self) -> None:
        self._handlers: dict[str, DeviceHandler] = {}

    def register(self, handler: DeviceHandler) -> None:
        uid = handler.thing.uid
        if uid in self._handlers:
            _logger.warning("Refusing to register a second handler for %s", uid)
            raise ThingRegistryError(f"a handler is already registered for {uid}", uid=uid)
        self._handlers[uid] = handler

    def unregister(self, uid: str) -> None:
        self._handlers.pop(uid, None)

    def get(self, uid: str | None) -> DeviceHandler | None:
        if uid is None:
            return None
        return self._handlers.get(uid)

    def children_of(self, uid: str) -> list[DeviceHandler]:
        return [handler for handler in self._handlers.values() if handler.thing.bridge_uid == uid]

    def __contains__(self, uid: object) -> bool:
        return uid in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


class DeviceHandler:
    """Reference handler: fans API objects out to its capabilities.

    Usage::

        registry = ThingRegistry()
        handler = DeviceHandler(Thing("netatmo:plug:home:70ee50", "netatmo:plug"), registry)
        handler.add_capability(RefreshCapability(handler))
        handler.initialize()
        handler.set_new_data(home_status_module)
    """

    def __init__(
        self,
        thing: Thing,
        registry: ThingRegistry,
        *,
        config: NacapConfig | None = None,
    ) -> None:
        self._thing = thing
        self._registry = registry
        self._config = config or NacapConfig()
        self._capabilities = CapabilityMap()
        registry.register(self)

    def __repr__(self) -> str:
        return f"DeviceHandler(thing={self._thing.uid!r})"

    @property
    def thing(self) -> Thing:
        return self._thing

    @property
    def config(self) -> NacapConfig:
        return self._config

    @property
    def capabilities(self) -> CapabilityMap:
        return self._capabilities

    def add_capability(self, capability: Capability) -> Capability:
        self._capabilities.put(capability)
        return capability

    def get_bridge_handler(self) -> DeviceHandler | None:
        return self._registry.get(self._thing.bridge_uid)

    def get_active_children(self) -> list[DeviceHandler]:
        return self._registry.children_of(self._thing.uid)

    def _child_for(self, api_id: str | None) -> DeviceHandler | None:
        for child in self.get_active_children():
            if child.thing.api_id == api_id:
                return child
        return None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        for capability in self._capabilities:
            capability.initialize()

    def dispose(self) -> None:
        for capability in self._capabilities:
            capability.dispose()
        self._registry.unregister(self._thing.uid)

    # ------------------------------------------------------------------
    # Data flow
    # ------------------------------------------------------------------

    def set_new_data(self, new_data: Any) -> str | None:
        """Dispatch *new_data* to every capability and update the thing status.

        The last non-``None`` reason returned by a capability takes the
        thing offline; no reason brings it online. A thing snapshot bridged
        through this handler belongs to the child whose API id matches it
        and is handed to that child instead.
        """
        if isinstance(new_data, NAThing) and new_data.bridge == self._thing.api_id:
            child = self._child_for(new_data.id)
            if child is None:
                _logger.debug("%s has no child for %s", self, new_data.id)
                return None
            return child.set_new_data(new_data)

        final_reason: str | None = None
        for capability in self._capabilities:
            reason = capability.set_new_data(new_data)
            if reason is not None:
                final_reason = reason
        if final_reason is not None:
            self._thing.set_status(ThingStatus.OFFLINE, final_reason)
        else:
            self._thing.set_status(ThingStatus.ONLINE)
        return final_reason

    def expire_data(self) -> None:
        for capability in self._capabilities:
            capability.expire_data()

    def handle_command(self, channel_name: str, command: Command) -> None:
        _logger.debug("%s handling %s=%r", self, channel_name, command)
        for capability in self._capabilities:
            capability.handle_command(channel_name, command)

    def get_services(self) -> list[type[Any]]:
        services: list[type[Any]] = []
        for capability in self._capabilities:
            for service in capability.get_services():
                if service not in services:
                    services.append(service)
        return services

    def update_readings(self) -> list[NAObject]:
        """Collect fresh objects from capabilities and from children that do not poll."""
        readings: list[NAObject] = []
        for capability in self._capabilities:
            readings.extend(capability.update_readings())
        for child in self.get_active_children():
            if not child.capabilities.contains(RefreshCapability):
                readings.extend(child.update_readings())
        return readings

    def proceed_with_update(self) -> None:
        readings = self.update_readings()
        _logger.debug("%s dispatching %d readings", self, len(readings))
        for reading in readings:
            self.set_new_data(reading)
