"""Capabilities attached to thing handlers."""

from pynacap.capability.base import Capability, Command
from pynacap.capability.capability_map import CapabilityMap
from pynacap.capability.refresh import RefreshCapability

__all__ = [
    "Capability",
    "CapabilityMap",
    "Command",
    "RefreshCapability",
]
