"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error body for request-level failures."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"


# Inventory models


class PortResponse(BaseModel):
    """A published port."""

    model_config = ConfigDict(from_attributes=True)

    container: int
    host: int
    protocol: str
    url: str


class ContainerResponse(BaseModel):
    """A running container."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    image: str
    status: str
    created: int
    ports: list[PortResponse]


class RunningProjectResponse(BaseModel):
    """A running compose project."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    containers: list[ContainerResponse]
    ports: list[PortResponse]
    status: str
    repository: str | None = None


# Launch models


class ProjectResultResponse(BaseModel):
    """Per-project outcome of a launch."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    status: str
    stage: str
    error: str | None = None
    output: str | None = None


class BatchReportResponse(BaseModel):
    """Result of a launch run."""

    model_config = ConfigDict(from_attributes=True)

    total: int
    results: list[ProjectResultResponse]


# Android models


class AndroidProjectResponse(BaseModel):
    """Checkout state of an Android project."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    repository: str
    exists: bool
    last_modified: datetime | None = Field(serialization_alias="lastModified")
    path: str


class DeviceResponse(BaseModel):
    """A connected device."""

    model_config = ConfigDict(from_attributes=True)

    serial: str
    model: str
    product: str
    status: str


class DeviceListResponse(BaseModel):
    """Device listing; success is false when adb is unavailable."""

    model_config = ConfigDict(from_attributes=True)

    success: bool
    devices: list[DeviceResponse]
    error: str | None = None


class CloneResultResponse(BaseModel):
    """Sync outcome for one Android project."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    success: bool
    path: str | None = None
    error: str | None = None


class CloneAllResponse(BaseModel):
    """Result of cloning all Android projects."""

    success: bool
    results: list[CloneResultResponse]


class InstallRequest(BaseModel):
    """Request body for installing an Android project on a device."""

    model_config = ConfigDict(populate_by_name=True)

    project_name: str | None = Field(default=None, alias="projectName")
    device_serial: str | None = Field(default=None, alias="deviceSerial")


class InstallResponse(BaseModel):
    """Outcome of an Android build and install."""

    model_config = ConfigDict(from_attributes=True)

    success: bool
    message: str | None = None
    output: str | None = None
    error: str | None = None
    apk_path: str | None = Field(default=None, serialization_alias="apkPath")
    stderr: str | None = None


# Converters from domain objects


def running_project_to_response(project: Any) -> RunningProjectResponse:
    """Convert a RunningProject to RunningProjectResponse."""
    return RunningProjectResponse.model_validate(project)


def batch_report_to_response(report: Any) -> BatchReportResponse:
    """Convert a BatchReport to BatchReportResponse."""
    return BatchReportResponse(
        total=report.total,
        results=[
            ProjectResultResponse(
                name=r.name,
                status=str(r.status),
                stage=str(r.stage),
                error=r.error,
                output=r.output,
            )
            for r in report.results
        ],
    )


def android_project_to_response(status: Any) -> AndroidProjectResponse:
    """Convert an AndroidProjectStatus to AndroidProjectResponse."""
    return AndroidProjectResponse(
        name=status.name,
        repository=status.repository,
        exists=status.exists,
        last_modified=status.last_modified,
        path=str(status.path),
    )


def clone_result_to_response(result: Any) -> CloneResultResponse:
    """Convert a CloneResult to CloneResultResponse."""
    return CloneResultResponse(
        name=result.name,
        success=result.success,
        path=str(result.path) if result.path is not None else None,
        error=result.error,
    )


def install_result_to_response(result: Any) -> InstallResponse:
    """Convert an InstallResult to InstallResponse."""
    return InstallResponse(
        success=result.success,
        message=result.message,
        output=result.output,
        error=result.error,
        apk_path=str(result.apk_path) if result.apk_path is not None else None,
        stderr=result.stderr,
    )
