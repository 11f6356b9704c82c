"""Running project inventory and launch endpoints."""

from fastapi import APIRouter

from dclauncher.api.dependencies import InventoryDep, OrchestratorDep
from dclauncher.api.models import (
    BatchReportResponse,
    HealthResponse,
    RunningProjectResponse,
    batch_report_to_response,
    running_project_to_response,
)

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=list[RunningProjectResponse])
def list_running_projects(inventory: InventoryDep) -> list[RunningProjectResponse]:
    """List running compose projects with their containers and ports."""
    projects = inventory.get_running_projects()
    return [running_project_to_response(p) for p in projects]


@router.post(
    "/launch",
    response_model=BatchReportResponse,
    response_model_exclude_none=True,
)
def launch_projects(orchestrator: OrchestratorDep) -> BatchReportResponse:
    """Sync and start every enabled project, one after another."""
    report = orchestrator.launch_projects()
    return batch_report_to_response(report)


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness check."""
    return HealthResponse()
