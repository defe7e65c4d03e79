"""Per-handler capability registry."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from pynacap.capability.base import Capability

TCapability = TypeVar("TCapability", bound=Capability)


class CapabilityMap:
    """Capabilities of one handler, one instance per class.

    Iteration follows insertion order, which is also the order objects are
    dispatched in.
    """

    def __init__(self) -> None:
        self._capabilities: dict[type[Capability], Capability] = {}

    def put(self, capability: Capability) -> None:
        """Register *capability*, replacing any instance of the same class."""
        self._capabilities[type(capability)] = capability

    def get(self, cls: type[TCapability]) -> TCapability | None:
        capability = self._capabilities.get(cls)
        if capability is None:
            for candidate in self._capabilities.values():
                if isinstance(candidate, cls):
                    return candidate
            return None
        return capability  # type: ignore[return-value]

    def contains(self, cls: type[Capability]) -> bool:
        """Whether a capability of *cls* (or a subclass) is registered."""
        return self.get(cls) is not None

    def remove(self, cls: type[TCapability]) -> TCapability | None:
        """Unregister the capability :meth:`get` would return for *cls*."""
        capability = self.get(cls)
        if capability is not None:
            del self._capabilities[type(capability)]
        return capability

    def values(self) -> list[Capability]:
        return list(self._capabilities.values())

    def __contains__(self, cls: object) -> bool:
        return isinstance(cls, type) and issubclass(cls, Capability) and self.contains(cls)

    def __iter__(self) -> Iterator[Capability]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._capabilities)
