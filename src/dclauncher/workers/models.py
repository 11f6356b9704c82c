"""Data models for workers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class StageResult:
    """Result of one build/run stage.

    Attributes:
        success: Whether the command succeeded.
        output: Captured command output.
        error: Error message, with a remediation hint when one applies.
    """

    success: bool
    output: str | None = None
    error: str | None = None


@dataclass
class InstallResult:
    """Result of building and installing an Android project.

    Attributes:
        success: Whether the app is installed on the device.
        message: Human-readable summary on success.
        output: Gradle output.
        error: Error message on failure.
        apk_path: Installed APK when it was located in the build output.
        stderr: Raw tool output accompanying a failure.
    """

    success: bool
    message: str | None = None
    output: str | None = None
    error: str | None = None
    apk_path: Path | None = None
    stderr: str | None = None
