"""Configuration - Launcher settings and the declarative project list."""

from dclauncher.config.exceptions import ConfigurationError
from dclauncher.config.loader import ProjectConfig, load_projects
from dclauncher.config.models import LauncherSettings, ProjectDescriptor, ProjectType

__all__ = [
    "ConfigurationError",
    "LauncherSettings",
    "ProjectConfig",
    "ProjectDescriptor",
    "ProjectType",
    "load_projects",
]
