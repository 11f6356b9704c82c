"""Data models for launcher configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from dclauncher.config.exceptions import ConfigurationError

DEFAULT_CONFIG_FILE = "projects.json"
DEFAULT_PROJECTS_DIR = "projects"
DEFAULT_DOCKER_SOCKET = "/var/run/docker.sock"


class ProjectType(StrEnum):
    """Kind of project, selecting the build tooling."""

    GENERIC = "generic"
    ANDROID = "android"


@dataclass(frozen=True)
class ProjectDescriptor:
    """A configured project.

    Attributes:
        name: Unique project name. Used as the checkout directory name and
              matched case-insensitively against compose project labels.
        repository: Git URL to clone from.
        type: Project type (generic docker compose project or Android app).
        enabled: Disabled projects are skipped by every batch operation.
    """

    name: str
    repository: str
    type: ProjectType = ProjectType.GENERIC
    enabled: bool = True

    @property
    def is_android(self) -> bool:
        return self.type == ProjectType.ANDROID

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.lower() == name.lower()

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> ProjectDescriptor:
        """Create a descriptor from one entry of the `projects` list.

        Args:
            data: Mapping parsed from the configuration file.
            index: Position in the list, used in error messages.

        Returns:
            Parsed descriptor.

        Raises:
            ConfigurationError: If required fields are missing or malformed.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Project #{index} must be a mapping")

        missing = [f for f in ("name", "repository") if not data.get(f)]
        if missing:
            raise ConfigurationError(f"Project #{index} is missing: {', '.join(missing)}")

        name = data["name"]
        repository = data["repository"]
        if not isinstance(name, str) or not isinstance(repository, str):
            raise ConfigurationError(f"Project #{index}: name and repository must be strings")
        # The name doubles as the checkout directory name
        if name in (".", "..") or "/" in name or "\\" in name:
            raise ConfigurationError(f"Project #{index}: invalid project name {name!r}")

        raw_type = data.get("type") or ProjectType.GENERIC.value
        # Any non-android type (e.g. "web") is handled as a compose project
        project_type = ProjectType.ANDROID if raw_type == "android" else ProjectType.GENERIC

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigurationError(f"Project '{name}': enabled must be true or false")

        return cls(name=name, repository=repository, type=project_type, enabled=enabled)


@dataclass
class LauncherSettings:
    """Filesystem and runtime locations used by the launcher.

    The projects directory sits next to the configuration file, one
    checkout per project name.
    """

    root_dir: Path
    config_file: Path
    projects_dir: Path
    docker_socket: str = DEFAULT_DOCKER_SOCKET

    @classmethod
    def from_root(
        cls,
        root_dir: str | Path,
        config_file: str | Path | None = None,
        projects_dir: str | Path | None = None,
        docker_socket: str | None = None,
    ) -> LauncherSettings:
        root = Path(root_dir).resolve()
        return cls(
            root_dir=root,
            config_file=Path(config_file) if config_file else root / DEFAULT_CONFIG_FILE,
            projects_dir=Path(projects_dir) if projects_dir else root / DEFAULT_PROJECTS_DIR,
            docker_socket=docker_socket or DEFAULT_DOCKER_SOCKET,
        )

    @classmethod
    def from_env(cls) -> LauncherSettings:
        """Build settings from DCLAUNCHER_* environment variables.

        DCLAUNCHER_ROOT defaults to the current directory.
        """
        return cls.from_root(
            os.environ.get("DCLAUNCHER_ROOT", "."),
            config_file=os.environ.get("DCLAUNCHER_CONFIG"),
            projects_dir=os.environ.get("DCLAUNCHER_PROJECTS_DIR"),
            docker_socket=os.environ.get("DCLAUNCHER_DOCKER_SOCKET"),
        )

    def ensure_projects_dir(self) -> Path:
        self.projects_dir.mkdir(parents=True, exist_ok=True)
        return self.projects_dir
