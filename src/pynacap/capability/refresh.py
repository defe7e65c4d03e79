"""Polling freshness tracking.

A thing carrying a :class:`RefreshCapability` polls the API on its own
instead of relying on its bridge. Until a refresh interval is configured
the capability probes: it polls every :data:`PROBING_INTERVAL` seconds and
learns the interval from two successive ``last_seen`` timestamps.

Scheduling is left to the caller, which asks :meth:`next_refresh_delay`
how long to sleep and then calls :meth:`poll`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from pynacap._constants import OFFLINE_INTERVAL, PROBING_INTERVAL, PROPERTY_REFRESH_PERIOD
from pynacap.capability.base import Capability
from pynacap.models.objects import NAThing
from pynacap.thing import ThingStatus

if TYPE_CHECKING:
    from pynacap.handler import CommonInterface

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RefreshCapability(Capability):
    def __init__(
        self,
        handler: CommonInterface,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        super().__init__(handler)
        self._clock = clock
        interval = handler.config.refresh_interval
        self.refresh_configured = interval > 0
        self.data_validity = timedelta(seconds=interval if self.refresh_configured else PROBING_INTERVAL)
        self.data_timestamp = clock()
        self._first_timestamp: datetime | None = None

    @property
    def probing(self) -> bool:
        return not self.refresh_configured

    def expire_data(self) -> None:
        # Never cascades: this thing refreshes itself.
        self.data_timestamp = self._clock() - self.data_validity

    def update_na_thing(self, new_data: NAThing) -> None:
        super().update_na_thing(new_data)
        last_seen = new_data.last_seen
        if last_seen is None:
            return
        if self.probing:
            if self._first_timestamp is None:
                self._first_timestamp = last_seen
                _logger.debug("%s first data timestamp is %s", self, last_seen)
            elif last_seen > self._first_timestamp:
                self.data_validity = last_seen - self._first_timestamp
                self.refresh_configured = True
                _logger.debug("%s data validity period identified to be %s", self, self.data_validity)
            else:
                _logger.debug("%s data validity period not yet found", self)
        self.data_timestamp = last_seen

    def after_new_data(self, new_data: Any | None) -> None:
        if not self.probing:
            self.properties[PROPERTY_REFRESH_PERIOD] = str(int(self.data_validity.total_seconds()))
        super().after_new_data(new_data)

    def data_age(self, now: datetime | None = None) -> timedelta:
        return (now or self._clock()) - self.data_timestamp

    def is_data_expired(self, now: datetime | None = None) -> bool:
        return self.data_age(now) >= self.data_validity

    def next_refresh_delay(self, now: datetime | None = None) -> float:
        """Seconds to wait before the next poll."""
        if self.thing.status == ThingStatus.OFFLINE:
            return OFFLINE_INTERVAL
        if self.probing:
            return PROBING_INTERVAL
        remaining = self.data_validity - self.data_age(now)
        return max(0.0, remaining.total_seconds())

    def poll(self, now: datetime | None = None) -> bool:
        """Run the handler's update cycle if the data has expired."""
        if self.probing or self.is_data_expired(now):
            self.handler.proceed_with_update()
            return True
        return False
