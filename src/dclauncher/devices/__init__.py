"""Device Bridge - Enumerates and installs onto devices through adb."""

from dclauncher.devices.adb import DeviceBridge, parse_devices
from dclauncher.devices.exceptions import DeviceBridgeError, InstallError, ToolUnavailableError
from dclauncher.devices.models import Device, DeviceListing

__all__ = [
    "Device",
    "DeviceBridge",
    "DeviceBridgeError",
    "DeviceListing",
    "InstallError",
    "ToolUnavailableError",
    "parse_devices",
]
