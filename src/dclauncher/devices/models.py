"""Data models for the device bridge."""

from __future__ import annotations

from dataclasses import dataclass, field

UNKNOWN = "Unknown"


@dataclass
class Device:
    """A connected device reported by `adb devices -l`."""

    serial: str
    model: str = UNKNOWN
    product: str = UNKNOWN
    status: str = "connected"


@dataclass
class DeviceListing:
    """Result of enumerating devices.

    Attributes:
        success: False when adb is missing or the listing failed.
        devices: Connected devices, empty on failure.
        error: Why the listing failed.
    """

    success: bool
    devices: list[Device] = field(default_factory=list)
    error: str | None = None
