"""Inventory - Running compose projects from the container runtime."""

from dclauncher.inventory.docker_client import DockerClient
from dclauncher.inventory.exceptions import ContainerRuntimeError, InventoryError
from dclauncher.inventory.models import ContainerInfo, PortMapping, RunningProject
from dclauncher.inventory.reporter import COMPOSE_PROJECT_LABEL, InventoryReporter

__all__ = [
    "COMPOSE_PROJECT_LABEL",
    "ContainerInfo",
    "ContainerRuntimeError",
    "DockerClient",
    "InventoryError",
    "InventoryReporter",
    "PortMapping",
    "RunningProject",
]
