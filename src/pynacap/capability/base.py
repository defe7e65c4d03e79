"""Base class of every capability.

A capability is one functional facet of a thing handler (measurements,
configuration, refresh, ...). The handler feeds it every API object it
receives through :meth:`Capability.set_new_data`, which classifies the
object and calls the matching ``update_*`` hooks. Subclasses override only
the hooks they care about.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pynacap._constants import (
    PROPERTY_FIRMWARE_VERSION,
    PROPERTY_MODEL_ID,
    PROPERTY_THING_TYPE_VERSION,
    PROPERTY_VENDOR,
    STATUS_DEVICE_NOT_CONNECTED,
)
from pynacap._redact import redact_for_log
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

if TYPE_CHECKING:
    from pynacap.handler import CommonInterface

_logger = logging.getLogger(__name__)

Command = str | int | float | bool
"""A value written to a channel."""


class Capability:
    """Base class for all capabilities.

    Parameters
    ----------
    handler
        The owning thing handler. The thing, its UID and its module type
        are resolved from it once.
    """

    def __init__(self, handler: CommonInterface) -> None:
        self.handler = handler
        self.thing = handler.thing
        self.thing_uid = self.thing.uid
        self.module_type = ModuleType.from_thing_type_uid(self.thing.thing_type_uid, handler.config.binding_id)

        self.first_launch = False
        self.properties: dict[str, str] = {}
        self.status_reason: str | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(thing={self.thing_uid!r})"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def set_new_data(self, new_data: Any) -> str | None:
        """Apply one API object and return the resulting status reason.

        Error objects only reach :meth:`update_errors`. Everything else is
        offered to each hook whose kind it matches, in a fixed order; only
        one hook of the event family runs. Objects matching no kind leave
        the properties untouched apart from first-launch defaults.
        """
        self.before_new_data()
        kinds = classify(new_data)
        hooks: list[Callable[[Any], None]] = []
        if UpdateKind.ERROR in kinds:
            hooks.append(self.update_errors)
        else:
            if UpdateKind.HOME_DATA in kinds:
                hooks.append(self.update_home_data)
            if UpdateKind.HOME_STATUS in kinds:
                hooks.append(self.update_home_status)
            if UpdateKind.HOME_STATUS_MODULE in kinds:
                hooks.append(self.update_home_status_module)

            if UpdateKind.HOME_EVENT in kinds:
                hooks.append(self.update_home_event)
            elif UpdateKind.WEBHOOK_EVENT in kinds and new_data.event_type.valid_for(self.module_type):
                hooks.append(self.update_webhook_event)
            elif UpdateKind.EVENT in kinds:
                hooks.append(self.update_event)

            if UpdateKind.THING in kinds:
                hooks.append(self.update_na_thing)
            if UpdateKind.MAIN_DEVICE in kinds:
                hooks.append(self.update_na_main)
            if UpdateKind.DEVICE in kinds:
                hooks.append(self.update_na_device)

        _logger.debug("%s <- %s %s, hooks %s", self, type(new_data).__name__, kinds, [h.__name__ for h in hooks])
        if self.handler.config.trace_payloads and isinstance(new_data, NAObject):
            _logger.debug("%s payload: %s", self, redact_for_log(new_data.raw))

        for hook in hooks:
            hook(new_data)

        self.after_new_data(new_data)
        return self.status_reason

    def before_new_data(self) -> None:
        self.properties = dict(self.thing.properties)
        self.first_launch = not self.properties
        if self.first_launch:
            self.properties[PROPERTY_THING_TYPE_VERSION] = self.module_type.thing_type_version
            if not self.module_type.is_logical():
                self.properties[PROPERTY_MODEL_ID] = self.module_type.name_for_model
                self.properties[PROPERTY_VENDOR] = self.handler.config.vendor
        self.status_reason = None

    def after_new_data(self, new_data: Any | None) -> None:
        if self.properties != dict(self.thing.properties):
            _logger.debug("%s writing back %d properties", self, len(self.properties))
            self.thing.set_properties(self.properties)

    # ------------------------------------------------------------------
    # Update hooks
    # ------------------------------------------------------------------

    def update_na_thing(self, new_data: NAThing) -> None:
        firmware = new_data.firmware
        if firmware is not None and firmware.strip():
            self.properties[PROPERTY_FIRMWARE_VERSION] = firmware
        if not new_data.is_reachable:
            self.status_reason = STATUS_DEVICE_NOT_CONNECTED

    def update_na_main(self, new_data: NAMain) -> None:
        pass

    def update_home_event(self, new_data: HomeEvent) -> None:
        pass

    def update_home_status(self, new_data: HomeStatus) -> None:
        pass

    def update_home_data(self, new_data: HomeData) -> None:
        pass

    def update_event(self, new_data: Event) -> None:
        pass

    def update_webhook_event(self, new_data: WebhookEvent) -> None:
        pass

    def update_na_device(self, new_data: Device) -> None:
        pass

    def update_errors(self, error: NAError) -> None:
        pass

    def update_home_status_module(self, new_data: HomeStatusModule) -> None:
        pass

    # ------------------------------------------------------------------
    # Lifecycle and commands
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        pass

    def dispose(self) -> None:
        pass

    def expire_data(self) -> None:
        """Ask the bridge to refresh when this thing does not poll by itself."""
        # Imported here: the refresh capability subclasses this one.
        from pynacap.capability.refresh import RefreshCapability

        if not self.handler.capabilities.contains(RefreshCapability):
            bridge_handler = self.handler.get_bridge_handler()
            if bridge_handler is not None:
                _logger.debug("%s expiring bridge %s", self, bridge_handler.thing.uid)
                bridge_handler.expire_data()

    def handle_command(self, channel_name: str, command: Command) -> None:
        pass

    def get_services(self) -> list[type[Any]]:
        """Service classes this capability contributes to its handler."""
        return []

    def update_readings(self) -> list[NAObject]:
        """Freshly fetched objects to dispatch back through the handler."""
        return []
