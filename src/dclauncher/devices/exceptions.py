"""Custom exceptions for the device bridge."""


class DeviceBridgeError(Exception):
    """Base exception for device bridge errors."""


class ToolUnavailableError(DeviceBridgeError):
    """adb is not installed or not in PATH."""


class InstallError(DeviceBridgeError):
    """Installing a package onto a device failed."""
