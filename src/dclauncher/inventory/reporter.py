"""InventoryReporter - Groups running containers into compose projects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dclauncher.config import ConfigurationError
from dclauncher.inventory.models import ContainerInfo, PortMapping, RunningProject

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from dclauncher.config import ProjectConfig
    from dclauncher.inventory.docker_client import DockerClient

logger = logging.getLogger("dclauncher.inventory")

COMPOSE_PROJECT_LABEL = "com.docker.compose.project"


def _published_ports(raw_ports: Iterable[dict[str, Any]]) -> list[PortMapping]:
    ports = []
    for port in raw_ports:
        public = port.get("PublicPort")
        if not public:
            continue
        ports.append(
            PortMapping(
                container=port.get("PrivatePort", 0),
                host=public,
                protocol=port.get("Type", "tcp"),
                url=f"http://localhost:{public}",
            )
        )
    return ports


def _container_info(container: dict[str, Any]) -> ContainerInfo:
    names = container.get("Names") or [""]
    return ContainerInfo(
        id=container.get("Id", "")[:12],
        name=names[0].lstrip("/"),
        image=container.get("Image", ""),
        status=container.get("State", ""),
        created=container.get("Created", 0),
        ports=_published_ports(container.get("Ports") or []),
    )


def group_containers(containers: Iterable[dict[str, Any]]) -> list[RunningProject]:
    """Group container summaries by compose project label.

    Containers without the label are not part of a compose project and are
    skipped. Each project lists every distinct host port once, in the order
    first seen.
    """
    projects: dict[str, RunningProject] = {}
    for container in containers:
        label = (container.get("Labels") or {}).get(COMPOSE_PROJECT_LABEL)
        if not label:
            continue

        project = projects.setdefault(label, RunningProject(name=label))
        info = _container_info(container)
        project.containers.append(info)

        known_hosts = {p.host for p in project.ports}
        for port in info.ports:
            if port.host not in known_hosts:
                project.ports.append(port)
                known_hosts.add(port.host)

    return list(projects.values())


class InventoryReporter:
    """Reports running compose projects with their configured repositories."""

    def __init__(
        self,
        docker_client: DockerClient,
        config_loader: Callable[[], ProjectConfig],
    ) -> None:
        """Initialize the Inventory Reporter.

        Args:
            docker_client: Client for the container runtime.
            config_loader: Returns the current project configuration.
        """
        self.docker_client = docker_client
        self.config_loader = config_loader

    def get_running_projects(self) -> list[RunningProject]:
        """List running compose projects.

        A missing or broken configuration only means repositories are not
        filled in.

        Raises:
            ContainerRuntimeError: If the runtime cannot be queried.
        """
        projects = group_containers(self.docker_client.list_containers())

        try:
            config = self.config_loader()
        except ConfigurationError as e:
            logger.warning("Listing projects without repository info: %s", e)
            return projects

        for project in projects:
            configured = config.find(project.name)
            if configured is not None:
                project.repository = configured.repository

        logger.debug("Found %d running projects", len(projects))
        return projects
