"""Android project, device and install endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dclauncher.api.dependencies import DeviceBridgeDep, OrchestratorDep
from dclauncher.api.models import (
    AndroidProjectResponse,
    CloneAllResponse,
    DeviceListResponse,
    InstallRequest,
    InstallResponse,
    android_project_to_response,
    clone_result_to_response,
    install_result_to_response,
)

router = APIRouter(prefix="/android", tags=["android"])

INSTALL_EXAMPLES = {
    "install": {
        "summary": "Install on a device",
        "value": {"projectName": "sample-app", "deviceSerial": "emulator-5554"},
    },
}


@router.get("/projects", response_model=list[AndroidProjectResponse])
def list_android_projects(orchestrator: OrchestratorDep) -> list[AndroidProjectResponse]:
    """List configured Android projects and their checkout state."""
    statuses = orchestrator.android_project_statuses()
    return [android_project_to_response(s) for s in statuses]


@router.get("/devices", response_model=DeviceListResponse)
def list_devices(device_bridge: DeviceBridgeDep) -> DeviceListResponse:
    """List devices connected through adb."""
    listing = device_bridge.list_devices()
    return DeviceListResponse.model_validate(listing)


@router.post("/clone", response_model=CloneAllResponse)
def clone_android_projects(orchestrator: OrchestratorDep) -> CloneAllResponse:
    """Clone or update every Android project."""
    results = orchestrator.clone_android_projects()
    return CloneAllResponse(
        success=True,
        results=[clone_result_to_response(r) for r in results],
    )


@router.post(
    "/install",
    response_model=InstallResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_400_BAD_REQUEST: {"model": InstallResponse}},
)
def install_android_project(
    orchestrator: OrchestratorDep,
    payload: Annotated[Any, Body(openapi_examples=INSTALL_EXAMPLES)] = None,
) -> InstallResponse | JSONResponse:
    """Build an Android project and install it on a device.

    Any body that does not carry both fields as strings gets a 400.
    """
    try:
        body = InstallRequest.model_validate(payload if payload is not None else {})
    except ValidationError:
        body = None
    if body is None or not body.project_name or not body.device_serial:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=InstallResponse(
                success=False, error="projectName and deviceSerial are required"
            ).model_dump(by_alias=True, exclude_none=True),
        )

    result = orchestrator.install_android_project(body.project_name, body.device_serial)
    return install_result_to_response(result)
