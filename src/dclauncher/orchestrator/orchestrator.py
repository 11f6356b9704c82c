"""Orchestrator - Sequential sync-then-build over configured projects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dclauncher.git_manager import SyncError
from dclauncher.orchestrator.models import (
    AndroidProjectStatus,
    BatchReport,
    CloneResult,
    ProjectResult,
    ProjectStatus,
    Stage,
)
from dclauncher.workers import InstallResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from dclauncher.config import ProjectConfig
    from dclauncher.git_manager import GitManager
    from dclauncher.workers import AndroidBuilder, ComposeWorker

logger = logging.getLogger("dclauncher.orchestrator")


class Orchestrator:
    """Drives projects through repository sync and build.

    Projects are processed one at a time in configuration order. A failure
    in one project is recorded in its result entry and never stops the
    rest of the batch.
    """

    def __init__(
        self,
        config_loader: Callable[[], ProjectConfig],
        git_manager: GitManager,
        compose_worker: ComposeWorker,
        android_builder: AndroidBuilder,
    ) -> None:
        """Initialize the Orchestrator.

        Args:
            config_loader: Returns the project configuration. Called on every
                           operation so edits to the file apply to the next run.
            git_manager: GitManager for clone/pull.
            compose_worker: Worker running docker compose.
            android_builder: Builder for Android projects.
        """
        self.config_loader = config_loader
        self.git_manager = git_manager
        self.compose_worker = compose_worker
        self.android_builder = android_builder

    def launch_projects(self) -> BatchReport:
        """Sync and start every enabled project.

        Returns:
            BatchReport with one entry per enabled project.

        Raises:
            ConfigurationError: If the configuration cannot be loaded.
        """
        projects = self.config_loader().enabled_projects
        logger.info("Launching %d projects", len(projects))

        results: list[ProjectResult] = []
        for project in projects:
            logger.info("=== Processing %s ===", project.name)

            sync = self.git_manager.sync(project)
            if not sync.success or sync.path is None:
                results.append(
                    ProjectResult(
                        name=project.name,
                        status=ProjectStatus.FAILED,
                        stage=Stage.CLONE,
                        error=sync.error,
                    )
                )
                continue

            stage = self.compose_worker.execute(sync.path, project.name)
            results.append(
                ProjectResult(
                    name=project.name,
                    status=ProjectStatus.SUCCESS if stage.success else ProjectStatus.FAILED,
                    stage=Stage.COMPLETED if stage.success else Stage.DOCKER_COMPOSE,
                    error=stage.error,
                    output=stage.output,
                )
            )

        failed = sum(1 for r in results if r.status == ProjectStatus.FAILED)
        logger.info("Launch finished: %d succeeded, %d failed", len(results) - failed, failed)
        return BatchReport(total=len(projects), results=results)

    def clone_android_projects(self) -> list[CloneResult]:
        """Clone or update every enabled Android project.

        Raises:
            ConfigurationError: If the configuration cannot be loaded.
        """
        results = []
        for project in self.config_loader().android_projects:
            sync = self.git_manager.sync(project)
            results.append(
                CloneResult(
                    name=project.name,
                    success=sync.success,
                    path=sync.path,
                    error=sync.error,
                )
            )
        return results

    def android_project_statuses(self) -> list[AndroidProjectStatus]:
        """Report checkout state for every enabled Android project.

        Raises:
            ConfigurationError: If the configuration cannot be loaded.
        """
        statuses = []
        for project in self.config_loader().android_projects:
            path = self.git_manager.project_path(project.name)
            statuses.append(
                AndroidProjectStatus(
                    name=project.name,
                    repository=project.repository,
                    exists=path.exists(),
                    last_modified=self.git_manager.last_commit_date(project.name),
                    path=path,
                )
            )
        return statuses

    def install_android_project(self, project_name: str, device_serial: str) -> InstallResult:
        """Build an Android project and install it on a device.

        Args:
            project_name: Name of the checked-out project.
            device_serial: Target device serial.

        Returns:
            InstallResult; build and install failures are reported, not raised.
        """
        try:
            path = self.git_manager.project_path(project_name)
        except SyncError as e:
            return InstallResult(success=False, error=str(e))

        logger.info("Installing %s on %s", project_name, device_serial)
        return self.android_builder.execute(path, project_name, device_serial)
