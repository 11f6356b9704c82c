"""Data models for the Orchestrator module."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003
from enum import StrEnum
from pathlib import Path  # noqa: TC003


class ProjectStatus(StrEnum):
    """Outcome of one project in a launch batch."""

    SUCCESS = "success"
    FAILED = "failed"


class Stage(StrEnum):
    """Last stage a project reached in a launch batch."""

    CLONE = "clone"
    DOCKER_COMPOSE = "docker-compose"
    COMPLETED = "completed"


@dataclass
class ProjectResult:
    """Per-project entry of a batch report.

    Attributes:
        name: Project name.
        status: success or failed.
        stage: clone if the sync failed, docker-compose if the build failed,
               completed otherwise.
        error: Sync error or classified build error.
        output: Build output (only when the build ran and succeeded).
    """

    name: str
    status: ProjectStatus
    stage: Stage
    error: str | None = None
    output: str | None = None


@dataclass
class BatchReport:
    """Aggregated result of one launch run.

    Attributes:
        total: Number of enabled projects attempted.
        results: One entry per project, in configuration order.
    """

    total: int
    results: list[ProjectResult] = field(default_factory=list)


@dataclass
class CloneResult:
    """Result of syncing one Android project."""

    name: str
    success: bool
    path: Path | None = None
    error: str | None = None


@dataclass
class AndroidProjectStatus:
    """Checkout state of a configured Android project.

    Attributes:
        name: Project name.
        repository: Repository URL.
        exists: Whether the checkout directory exists.
        last_modified: Date of the most recent commit, if known.
        path: Checkout path.
    """

    name: str
    repository: str
    exists: bool
    last_modified: datetime | None
    path: Path
