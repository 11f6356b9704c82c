"""DeviceBridge - adb device listing and package installation."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from dclauncher.devices.exceptions import InstallError, ToolUnavailableError
from dclauncher.devices.models import UNKNOWN, Device, DeviceListing
from dclauncher.process import CommandError, ToolNotFoundError, run_command

logger = logging.getLogger("dclauncher.devices")

ADB_NOT_INSTALLED = "ADB is not installed or not in PATH"

_MODEL = re.compile(r"model:(\S+)")
_PRODUCT = re.compile(r"product:(\S+)")


def parse_devices(output: str) -> list[Device]:
    """Parse the output of `adb devices -l`.

    The first line is the "List of devices attached" header. A line is a
    connected device only when its state column is literally "device";
    offline, unauthorized and similar entries are skipped.
    """
    devices = []
    for line in output.splitlines()[1:]:
        parts = line.split()
        if len(parts) < 2 or parts[1] != "device":
            continue

        model = _MODEL.search(line)
        product = _PRODUCT.search(line)
        devices.append(
            Device(
                serial=parts[0],
                model=model.group(1) if model else UNKNOWN,
                product=product.group(1) if product else UNKNOWN,
            )
        )
    return devices


class DeviceBridge:
    """Thin wrapper around the adb command line tool."""

    def __init__(self, adb_path: str = "adb", timeout: float | None = None) -> None:
        """Initialize the Device Bridge.

        Args:
            adb_path: adb executable name or path.
            timeout: Optional timeout in seconds for adb commands.
        """
        self.adb_path = adb_path
        self.timeout = timeout

    def _run_adb(self, *args: str) -> str:
        return run_command([self.adb_path, *args], timeout=self.timeout).output

    def is_available(self) -> bool:
        """Check whether adb can be executed."""
        try:
            self._run_adb("version")
        except CommandError:
            return False
        return True

    def list_devices(self) -> DeviceListing:
        """List connected devices.

        A missing adb is reported in the listing rather than raised.
        """
        if not self.is_available():
            logger.warning(ADB_NOT_INSTALLED)
            return DeviceListing(success=False, error=ADB_NOT_INSTALLED)

        try:
            output = self._run_adb("devices", "-l")
        except CommandError as e:
            logger.error("Error getting ADB devices: %s", e)
            return DeviceListing(success=False, error=str(e))

        devices = parse_devices(output)
        logger.debug("Found %d connected devices", len(devices))
        return DeviceListing(success=True, devices=devices)

    def install(self, apk_path: str | Path, serial: str | None = None) -> str:
        """Install (or reinstall) an APK.

        Args:
            apk_path: Path to the APK file.
            serial: Target device serial. Without one adb picks the only
                    connected device.

        Returns:
            adb output.

        Raises:
            ToolUnavailableError: If adb is not installed.
            InstallError: If installation fails.
        """
        args = ["-s", serial] if serial else []
        args += ["install", "-r", str(Path(apk_path))]
        logger.info("Installing %s on device %s", apk_path, serial or "(default)")
        try:
            return self._run_adb(*args)
        except ToolNotFoundError as e:
            raise ToolUnavailableError(ADB_NOT_INSTALLED) from e
        except CommandError as e:
            raise InstallError(str(e)) from e
