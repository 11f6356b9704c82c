"""Loading of the declarative project list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from dclauncher.config.exceptions import ConfigurationError
from dclauncher.config.models import ProjectDescriptor

logger = logging.getLogger("dclauncher.config")


@dataclass
class ProjectConfig:
    """Parsed project configuration file."""

    projects: list[ProjectDescriptor] = field(default_factory=list)
    path: Path | None = None

    @property
    def enabled_projects(self) -> list[ProjectDescriptor]:
        """Enabled projects in configuration order."""
        return [p for p in self.projects if p.enabled]

    @property
    def android_projects(self) -> list[ProjectDescriptor]:
        """Enabled Android projects in configuration order."""
        return [p for p in self.enabled_projects if p.is_android]

    def find(self, name: str) -> ProjectDescriptor | None:
        """Find a project by case-insensitive name."""
        for project in self.projects:
            if project.matches(name):
                return project
        return None


def load_projects(config_path: Path | str) -> ProjectConfig:
    """Load the project list from a JSON or YAML file.

    JSON is parsed through the YAML loader, so both formats are accepted.

    Args:
        config_path: Path to the configuration file (usually projects.json).

    Returns:
        Parsed configuration.

    Raises:
        ConfigurationError: If the file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        logger.error("Configuration file not found: %s", config_path)
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Error reading config file %s: %s", config_path, e)
        raise ConfigurationError(f"Failed to load projects configuration: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping with a 'projects' list, got {type(data).__name__}"
        )

    raw_projects = data.get("projects")
    if not isinstance(raw_projects, list):
        raise ConfigurationError("Configuration must contain a 'projects' list")

    projects = [ProjectDescriptor.from_dict(entry, i) for i, entry in enumerate(raw_projects)]

    seen: set[str] = set()
    for project in projects:
        key = project.name.lower()
        if key in seen:
            raise ConfigurationError(f"Duplicate project name: {project.name}")
        seen.add(key)

    logger.debug("Loaded %d projects from %s", len(projects), config_path)
    return ProjectConfig(projects=projects, path=config_path)
