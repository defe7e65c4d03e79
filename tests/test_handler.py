from __future__ import annotations

from typing import Any

import pytest

from pynacap._constants import STATUS_DEVICE_NOT_CONNECTED
from pynacap.capability.base import Capability, Command
from pynacap.capability.refresh import RefreshCapability
from pynacap.exceptions import ThingRegistryError
from pynacap.handler import DeviceHandler, ThingRegistry
from pynacap.models.module_type import ModuleType
from pynacap.models.objects import NAError, NAObject, NAThing
from pynacap.thing import Thing, ThingStatus


class _Service:
    pass


class _OtherService:
    pass


class _StubCapability(Capability):
    def __init__(self, handler: Any, *, reason: str | None = None, readings: list[NAObject] | None = None) -> None:
        super().__init__(handler)
        self.reason = reason
        self.readings = readings or []
        self.commands: list[tuple[str, Command]] = []
        self.seen: list[Any] = []
        self.lifecycle: list[str] = []

    def set_new_data(self, new_data: Any) -> str | None:
        self.seen.append(new_data)
        super().set_new_data(new_data)
        return self.reason

    def initialize(self) -> None:
        self.lifecycle.append("initialize")

    def dispose(self) -> None:
        self.lifecycle.append("dispose")

    def handle_command(self, channel_name: str, command: Command) -> None:
        self.commands.append((channel_name, command))

    def get_services(self) -> list[type[Any]]:
        return [_Service]

    def update_readings(self) -> list[NAObject]:
        return list(self.readings)


class _SecondStub(_StubCapability):
    def get_services(self) -> list[type[Any]]:
        return [_Service, _OtherService]


def _thing(uid: str, module_type: ModuleType, bridge_uid: str | None = None) -> Thing:
    return Thing(uid=uid, thing_type_uid=module_type.thing_type_uid(), bridge_uid=bridge_uid)


class TestThingRegistry:
    def test_duplicate_uid_rejected(self) -> None:
        registry = ThingRegistry()
        DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), registry)
        with pytest.raises(ThingRegistryError) as excinfo:
            DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), registry)
        assert excinfo.value.uid == "netatmo:plug:p1"

    def test_bridge_lookup_and_children(self) -> None:
        registry = ThingRegistry()
        home = DeviceHandler(_thing("netatmo:home:h1", ModuleType.HOME), registry)
        valve = DeviceHandler(_thing("netatmo:valve:v1", ModuleType.VALVE, "netatmo:home:h1"), registry)

        assert valve.get_bridge_handler() is home
        assert home.get_bridge_handler() is None
        assert home.get_active_children() == [valve]

    def test_dispose_unregisters(self) -> None:
        registry = ThingRegistry()
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), registry)
        handler.dispose()
        assert "netatmo:plug:p1" not in registry
        assert len(registry) == 0


class TestSetNewData:
    def test_fans_out_and_goes_online(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        first = handler.add_capability(_StubCapability(handler))
        second = handler.add_capability(_SecondStub(handler))
        data = NAThing(id="p1")

        assert handler.set_new_data(data) is None

        assert first.seen == [data]
        assert second.seen == [data]
        assert handler.thing.status == ThingStatus.ONLINE
        assert handler.thing.status_detail is None

    def test_last_reason_wins_and_goes_offline(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        handler.add_capability(_StubCapability(handler, reason="first"))
        handler.add_capability(_SecondStub(handler, reason="second"))

        assert handler.set_new_data(NAError(code=6)) == "second"
        assert handler.thing.status == ThingStatus.OFFLINE
        assert handler.thing.status_detail == "second"

    def test_unreachable_module_takes_thing_offline(self) -> None:
        handler = DeviceHandler(_thing("netatmo:outdoor:o1", ModuleType.OUTDOOR), ThingRegistry())
        handler.add_capability(Capability(handler))

        handler.set_new_data(NAThing(id="o1", reachable=False))
        assert handler.thing.status_detail == STATUS_DEVICE_NOT_CONNECTED

        handler.set_new_data(NAThing(id="o1", reachable=True))
        assert handler.thing.status == ThingStatus.ONLINE


class TestForwarding:
    def test_lifecycle_and_commands(self) -> None:
        handler = DeviceHandler(_thing("netatmo:thermostat:t1", ModuleType.THERMOSTAT), ThingRegistry())
        capability = handler.add_capability(_StubCapability(handler))

        handler.initialize()
        handler.handle_command("setpoint", 20.5)
        handler.dispose()

        assert capability.lifecycle == ["initialize", "dispose"]
        assert capability.commands == [("setpoint", 20.5)]

    def test_services_deduplicated_in_order(self) -> None:
        handler = DeviceHandler(_thing("netatmo:welcome:c1", ModuleType.WELCOME), ThingRegistry())
        handler.add_capability(_StubCapability(handler))
        handler.add_capability(_SecondStub(handler))
        assert handler.get_services() == [_Service, _OtherService]

    def test_same_class_replaces_capability(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        handler.add_capability(_StubCapability(handler))
        replacement = handler.add_capability(_StubCapability(handler))
        assert len(handler.capabilities) == 1
        assert handler.capabilities.get(_StubCapability) is replacement


class TestReadings:
    def test_children_without_refresh_contribute(self) -> None:
        registry = ThingRegistry()
        home = DeviceHandler(_thing("netatmo:home:h1", ModuleType.HOME), registry)
        home.add_capability(_StubCapability(home, readings=[NAThing(id="h1")]))

        passive = DeviceHandler(_thing("netatmo:valve:v1", ModuleType.VALVE, "netatmo:home:h1"), registry)
        passive.add_capability(_StubCapability(passive, readings=[NAThing(id="v1")]))

        polling = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG, "netatmo:home:h1"), registry)
        polling.add_capability(_StubCapability(polling, readings=[NAThing(id="p1")]))
        polling.add_capability(RefreshCapability(polling))

        assert [reading.id for reading in home.update_readings()] == ["h1", "v1"]

    def test_proceed_with_update_dispatches_readings(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        readings = [NAThing(id="p1", firmware="1"), NAThing(id="p1", firmware="2")]
        capability = handler.add_capability(_StubCapability(handler, readings=readings))

        handler.proceed_with_update()

        assert capability.seen == readings
        assert handler.thing.properties["firmwareVersion"] == "2"

    def test_child_reading_reaches_child(self) -> None:
        registry = ThingRegistry()
        home = DeviceHandler(_thing("netatmo:home:h1", ModuleType.HOME), registry)
        home.add_capability(Capability(home))
        valve = DeviceHandler(_thing("netatmo:valve:v1", ModuleType.VALVE, "netatmo:home:h1"), registry)
        valve.add_capability(Capability(valve))
        passive = home.add_capability(_StubCapability(home))
        reading = NAThing(id="v1", bridge="h1", firmware="77", reachable=False)
        valve.add_capability(_StubCapability(valve, readings=[reading]))
        home.set_new_data(NAThing(id="h1"))
        writes_before = home.thing.property_writes

        home.proceed_with_update()

        assert valve.thing.properties["firmwareVersion"] == "77"
        assert valve.thing.status == ThingStatus.OFFLINE
        assert valve.thing.status_detail == STATUS_DEVICE_NOT_CONNECTED
        assert home.thing.property_writes == writes_before
        assert home.thing.status == ThingStatus.ONLINE
        assert reading not in passive.seen

    def test_bridged_reading_without_child_is_dropped(self) -> None:
        home = DeviceHandler(_thing("netatmo:home:h1", ModuleType.HOME), ThingRegistry())
        capability = home.add_capability(_StubCapability(home))

        assert home.set_new_data(NAThing(id="gone", bridge="h1")) is None
        assert capability.seen == []

    def test_expire_data_forwards_to_capabilities(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        refresh = handler.add_capability(RefreshCapability(handler))
        assert isinstance(refresh, RefreshCapability)

        handler.expire_data()

        assert refresh.is_data_expired()


class TestCapabilityMap:
    def test_lookup_matches_subclasses(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        second = handler.add_capability(_SecondStub(handler))

        assert handler.capabilities.get(_StubCapability) is second
        assert _StubCapability in handler.capabilities
        assert RefreshCapability not in handler.capabilities

    def test_remove_matches_like_get(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        plain = handler.add_capability(Capability(handler))
        second = handler.add_capability(_SecondStub(handler))

        assert handler.capabilities.remove(_StubCapability) is second
        assert not handler.capabilities.contains(_StubCapability)
        assert handler.capabilities.values() == [plain]
        assert handler.capabilities.remove(_StubCapability) is None

    def test_exact_class_preferred_over_subclass(self) -> None:
        handler = DeviceHandler(_thing("netatmo:plug:p1", ModuleType.PLUG), ThingRegistry())
        second = handler.add_capability(_SecondStub(handler))
        stub = handler.add_capability(_StubCapability(handler))

        assert handler.capabilities.remove(_StubCapability) is stub
        assert handler.capabilities.values() == [second]
