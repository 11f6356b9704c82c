"""Data models for the container inventory."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PortMapping:
    """A container port published on the host."""

    container: int
    host: int
    protocol: str
    url: str


@dataclass
class ContainerInfo:
    """A running container belonging to a compose project."""

    id: str
    name: str
    image: str
    status: str
    created: int
    ports: list[PortMapping] = field(default_factory=list)


@dataclass
class RunningProject:
    """Containers grouped under one compose project label.

    Attributes:
        name: Compose project label value.
        containers: Containers in the project, in runtime listing order.
        ports: Published ports, one entry per distinct host port.
        status: Always "running" for listed projects.
        repository: Repository URL from configuration, when the project is configured.
    """

    name: str
    containers: list[ContainerInfo] = field(default_factory=list)
    ports: list[PortMapping] = field(default_factory=list)
    status: str = "running"
    repository: str | None = None
