"""Orchestrator package - Sequential multi-project provisioning."""

from dclauncher.orchestrator.models import (
    AndroidProjectStatus,
    BatchReport,
    CloneResult,
    ProjectResult,
    ProjectStatus,
    Stage,
)
from dclauncher.orchestrator.orchestrator import Orchestrator

__all__ = [
    "AndroidProjectStatus",
    "BatchReport",
    "CloneResult",
    "Orchestrator",
    "ProjectResult",
    "ProjectStatus",
    "Stage",
]
