"""REST API for DCLauncher."""

from dclauncher.api.app import create_app
from dclauncher.api.dependencies import Services, build_services

__all__ = [
    "Services",
    "build_services",
    "create_app",
]
