"""Workers package for DCLauncher.

Contains the build/run workers invoked for each project type.
"""

from dclauncher.workers.android import AndroidBuilder, find_apk
from dclauncher.workers.compose import ComposeWorker
from dclauncher.workers.diagnostics import COMPOSE_RULES, DiagnosticRule, classify_compose_error
from dclauncher.workers.exceptions import ArtifactNotFoundError, BuildError, WorkerError
from dclauncher.workers.models import InstallResult, StageResult

__all__ = [
    "COMPOSE_RULES",
    "AndroidBuilder",
    "ArtifactNotFoundError",
    "BuildError",
    "ComposeWorker",
    "DiagnosticRule",
    "InstallResult",
    "StageResult",
    "WorkerError",
    "classify_compose_error",
    "find_apk",
]
