from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pynacap._constants import OFFLINE_INTERVAL, PROBING_INTERVAL, PROPERTY_REFRESH_PERIOD
from pynacap.capability.refresh import RefreshCapability
from pynacap.config import NacapConfig
from pynacap.handler import DeviceHandler, ThingRegistry
from pynacap.models.module_type import ModuleType
from pynacap.models.objects import NAThing
from pynacap.thing import Thing, ThingStatus


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


def _refresh(refresh_interval: float = 0.0) -> tuple[DeviceHandler, RefreshCapability, _Clock]:
    clock = _Clock()
    thing = Thing(uid="netatmo:weather-station:s1", thing_type_uid=ModuleType.WEATHER_STATION.thing_type_uid())
    handler = DeviceHandler(thing, ThingRegistry(), config=NacapConfig(refresh_interval=refresh_interval))
    capability = RefreshCapability(handler, clock=clock)
    handler.add_capability(capability)
    return handler, capability, clock


def test_probing_without_configured_interval() -> None:
    _, capability, _ = _refresh()
    assert capability.probing
    assert capability.next_refresh_delay() == PROBING_INTERVAL


def test_configured_interval_counts_down() -> None:
    _, capability, clock = _refresh(600)
    assert not capability.probing
    clock.now += timedelta(seconds=100)
    assert capability.next_refresh_delay() == 500.0
    assert not capability.is_data_expired()
    clock.now += timedelta(seconds=600)
    assert capability.next_refresh_delay() == 0.0
    assert capability.is_data_expired()


def test_expire_data_forces_immediate_refresh() -> None:
    _, capability, _ = _refresh(600)
    capability.expire_data()
    assert capability.is_data_expired()
    assert capability.next_refresh_delay() == 0.0


def test_validity_learned_from_successive_timestamps() -> None:
    _, capability, _ = _refresh()
    first = datetime(2026, 1, 1, 10, 0, tzinfo=UTC)

    capability.set_new_data(NAThing(id="s1", last_seen=first))
    assert capability.probing

    capability.set_new_data(NAThing(id="s1", last_seen=first))
    assert capability.probing

    capability.set_new_data(NAThing(id="s1", last_seen=first + timedelta(minutes=10)))
    assert not capability.probing
    assert capability.data_validity == timedelta(minutes=10)
    assert capability.data_timestamp == first + timedelta(minutes=10)


def test_refresh_period_property_written_once_known() -> None:
    handler, capability, _ = _refresh(300)
    capability.set_new_data(NAThing(id="s1"))
    assert handler.thing.properties[PROPERTY_REFRESH_PERIOD] == "300"


def test_refresh_period_absent_while_probing() -> None:
    handler, capability, _ = _refresh()
    capability.set_new_data(NAThing(id="s1"))
    assert PROPERTY_REFRESH_PERIOD not in handler.thing.properties


def test_offline_thing_waits_longer() -> None:
    handler, capability, _ = _refresh(600)
    handler.set_new_data(NAThing(id="s1", reachable=False))
    assert handler.thing.status == ThingStatus.OFFLINE
    assert capability.next_refresh_delay() == OFFLINE_INTERVAL


def test_poll_runs_update_cycle_only_when_expired() -> None:
    handler, capability, clock = _refresh(600)
    readings = [NAThing(id="s1", firmware="2.1")]
    capability.update_readings = lambda: readings  # type: ignore[method-assign]

    assert capability.poll() is False
    assert dict(handler.thing.properties) == {}

    clock.now += timedelta(seconds=601)
    assert capability.poll() is True
    assert handler.thing.properties["firmwareVersion"] == "2.1"
