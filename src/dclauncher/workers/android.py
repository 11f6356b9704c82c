"""Android Builder - Gradle builds and device installation."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from dclauncher.devices import DeviceBridgeError
from dclauncher.logging import truncate_output
from dclauncher.process import DEFAULT_MAX_OUTPUT, CommandError, run_command
from dclauncher.workers.exceptions import ArtifactNotFoundError, BuildError
from dclauncher.workers.models import InstallResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from dclauncher.devices import DeviceBridge

logger = logging.getLogger("dclauncher.workers.android")

GRADLE_WRAPPER = "gradlew"
APK_OUTPUT_DIR = ("build", "outputs", "apk")


def find_apk(project_path: Path) -> Path | None:
    """Find the first APK in a project's build outputs.

    Searches every `build/outputs/apk` tree below the project, skipping
    unaligned intermediates. Paths are sorted so the choice is stable.
    """
    candidates = sorted(
        path
        for path in project_path.rglob("*.apk")
        if "unaligned" not in path.name and _in_apk_outputs(path.relative_to(project_path))
    )
    return candidates[0] if candidates else None


def _in_apk_outputs(relative: Path) -> bool:
    parts = relative.parts[:-1]
    n = len(APK_OUTPUT_DIR)
    return any(parts[i : i + n] == APK_OUTPUT_DIR for i in range(len(parts) - n + 1))


class AndroidBuilder:
    """Builds an Android project with its Gradle wrapper and installs it.

    With a device serial the `installDebug` task builds and installs in one
    step. Without one the debug APK is assembled, located in the build
    outputs and installed through adb.
    """

    def __init__(
        self,
        device_bridge: DeviceBridge,
        max_output: int = DEFAULT_MAX_OUTPUT,
        timeout: float | None = None,
    ) -> None:
        """Initialize the Android Builder.

        Args:
            device_bridge: DeviceBridge used for APK installation.
            max_output: Maximum bytes of Gradle output to capture.
            timeout: Optional build timeout in seconds.
        """
        self.device_bridge = device_bridge
        self.max_output = max_output
        self.timeout = timeout
        self.log_callback: Callable[[str], None] | None = None

    def execute(
        self, project_path: Path, project_name: str, device_serial: str | None = None
    ) -> InstallResult:
        """Build and install a project.

        Args:
            project_path: Checkout directory of the Android project.
            project_name: Project name for messages.
            device_serial: Target device serial.

        Returns:
            InstallResult describing the outcome. Failures are returned,
            never raised.
        """
        if not project_path.exists():
            return InstallResult(
                success=False,
                error=f"Project {project_name} does not exist. Clone it first.",
            )

        gradlew = project_path / GRADLE_WRAPPER
        if not gradlew.is_file():
            return InstallResult(
                success=False,
                error="gradlew not found. This might not be a valid Android project.",
            )

        logger.info("Building %s...", project_name)
        try:
            self._make_executable(gradlew)
            if device_serial:
                output = self._gradle(project_path, "installDebug", device_serial)
                apk_path = None
            else:
                output = self._gradle(project_path, "assembleDebug")
                apk_path = find_apk(project_path)
                if apk_path is None:
                    raise ArtifactNotFoundError(
                        "APK built but could not be found in build output"
                    )
                self.device_bridge.install(apk_path, device_serial)
        except CommandError as e:
            logger.error("Error building/installing %s: %s", project_name, truncate_output(str(e)))
            return InstallResult(
                success=False, error=str(e), stderr=truncate_output(e.output) or None
            )
        except (BuildError, DeviceBridgeError) as e:
            logger.error("Error building/installing %s: %s", project_name, e)
            return InstallResult(success=False, error=str(e))

        target = device_serial or "the connected device"
        logger.info("Installed %s on %s", project_name, target)
        return InstallResult(
            success=True,
            message=f"Successfully built and installed {project_name} on device {target}",
            output=output,
            apk_path=apk_path,
        )

    def _make_executable(self, gradlew: Path) -> None:
        try:
            mode = gradlew.stat().st_mode
            gradlew.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            raise BuildError(f"Could not make gradlew executable: {e}") from e

    def _gradle(self, project_path: Path, task: str, device_serial: str | None = None) -> str:
        env = dict(os.environ)
        if device_serial:
            env["ANDROID_SERIAL"] = device_serial

        logger.info("Running ./gradlew %s", task)
        result = run_command(
            [f"./{GRADLE_WRAPPER}", task],
            cwd=project_path,
            env=env,
            max_output=self.max_output,
            timeout=self.timeout,
            line_callback=self.log_callback,
        )
        logger.debug("Build output: %s", truncate_output(result.output))
        return result.output
