"""FastAPI dependencies for dependency injection.

Services are constructed once per application in the lifespan handler and
kept on `app.state.services`; routes receive them through the dependencies
below.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Annotated

from fastapi import Depends, Request

from dclauncher.config import LauncherSettings, load_projects
from dclauncher.devices import DeviceBridge
from dclauncher.git_manager import GitManager
from dclauncher.inventory import DockerClient, InventoryReporter
from dclauncher.orchestrator import Orchestrator
from dclauncher.workers import AndroidBuilder, ComposeWorker


@dataclass
class Services:
    """Long-lived services shared by all requests."""

    settings: LauncherSettings
    orchestrator: Orchestrator
    inventory: InventoryReporter
    device_bridge: DeviceBridge
    docker_client: DockerClient

    def close(self) -> None:
        self.docker_client.close()


def build_services(settings: LauncherSettings) -> Services:
    """Wire up the services for a launcher root."""
    settings.ensure_projects_dir()
    config_loader = partial(load_projects, settings.config_file)

    device_bridge = DeviceBridge()
    docker_client = DockerClient(socket_path=settings.docker_socket)
    orchestrator = Orchestrator(
        config_loader=config_loader,
        git_manager=GitManager(settings.projects_dir),
        compose_worker=ComposeWorker(),
        android_builder=AndroidBuilder(device_bridge),
    )
    return Services(
        settings=settings,
        orchestrator=orchestrator,
        inventory=InventoryReporter(docker_client, config_loader),
        device_bridge=device_bridge,
        docker_client=docker_client,
    )


def get_services(request: Request) -> Services:
    """Dependency that provides the application's services."""
    services: Services | None = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized. Start the app through its lifespan.")
    return services


def get_orchestrator(request: Request) -> Orchestrator:
    """Dependency that provides the Orchestrator instance."""
    return get_services(request).orchestrator


def get_inventory(request: Request) -> InventoryReporter:
    """Dependency that provides the InventoryReporter instance."""
    return get_services(request).inventory


def get_device_bridge(request: Request) -> DeviceBridge:
    """Dependency that provides the DeviceBridge instance."""
    return get_services(request).device_bridge


# Type aliases for dependency injection
OrchestratorDep = Annotated[Orchestrator, Depends(get_orchestrator)]
InventoryDep = Annotated[InventoryReporter, Depends(get_inventory)]
DeviceBridgeDep = Annotated[DeviceBridge, Depends(get_device_bridge)]
