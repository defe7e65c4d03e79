"""Custom exception hierarchy for pynacap."""

from __future__ import annotations


class NacapError(Exception):
    """Base exception for all pynacap errors."""


class NacapConfigError(NacapError):
    """Invalid or missing configuration."""


class ThingRegistryError(NacapError):
    """Handler registration conflict or lookup failure."""

    def __init__(self, message: str, *, uid: str = "") -> None:
        self.uid = uid
        super().__init__(message)
