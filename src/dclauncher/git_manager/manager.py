"""GitManager - Clones and updates project checkouts."""

from __future__ import annotations

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from dclauncher.git_manager.exceptions import CloneError, PullError, SyncError
from dclauncher.git_manager.models import SyncAction, SyncResult
from dclauncher.logging import sanitize_for_log

if TYPE_CHECKING:
    from dclauncher.config import ProjectDescriptor

logger = logging.getLogger("dclauncher.git_manager")


class GitManager:
    """Keeps one checkout per project under the projects directory.

    A missing checkout is cloned, an existing one is pulled. Checkouts are
    never deleted or reset, so local changes that break a pull surface as
    a failed sync for that project only.
    """

    def __init__(self, projects_dir: str | Path) -> None:
        """Initialize Git Manager.

        Args:
            projects_dir: Directory holding one checkout per project name.
        """
        self.projects_dir = Path(projects_dir)

    def project_path(self, name: str) -> Path:
        """Get the checkout path for a project.

        Raises:
            SyncError: If the name would resolve outside the projects directory.
        """
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise SyncError(f"Invalid project name: {name!r}")
        return self.projects_dir / name

    def _run_git(self, *args: str, cwd: Path | None = None) -> str:
        """Run a git command.

        Args:
            *args: Git command arguments
            cwd: Working directory (defaults to the projects directory)

        Returns:
            Command stdout

        Raises:
            subprocess.CalledProcessError: If command fails
            FileNotFoundError: If git is not installed
        """
        env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
        result = subprocess.run(
            ["git", *args],
            cwd=cwd or self.projects_dir,
            capture_output=True,
            text=True,
            check=True,
            env=env,
        )
        return result.stdout.strip()

    def clone(self, repository: str, path: Path) -> None:
        """Clone a repository into path.

        Raises:
            CloneError: If the clone fails
        """
        self.projects_dir.mkdir(parents=True, exist_ok=True)
        try:
            self._run_git("clone", "--", repository, str(path))
        except subprocess.CalledProcessError as e:
            message = sanitize_for_log((e.stderr or str(e)).strip())
            raise CloneError(message) from e
        except FileNotFoundError as e:
            raise CloneError("git is not installed or not in PATH") from e

    def pull(self, path: Path) -> None:
        """Pull the latest changes into an existing checkout.

        Raises:
            PullError: If the pull fails
        """
        try:
            self._run_git("pull", cwd=path)
        except subprocess.CalledProcessError as e:
            message = sanitize_for_log((e.stderr or str(e)).strip())
            raise PullError(message) from e
        except FileNotFoundError as e:
            raise PullError("git is not installed or not in PATH") from e

    def sync(self, project: ProjectDescriptor) -> SyncResult:
        """Clone or update a project's checkout.

        Args:
            project: The project to sync.

        Returns:
            SyncResult with the checkout path, or the git error message.
        """
        try:
            path = self.project_path(project.name)
        except SyncError as e:
            logger.error("Error with repository %s: %s", project.name, e)
            return SyncResult(success=False, error=str(e))

        action = SyncAction.PULL if path.exists() else SyncAction.CLONE
        try:
            if action == SyncAction.PULL:
                logger.info("Updating %s...", project.name)
                self.pull(path)
            else:
                logger.info(
                    "Cloning %s from %s...", project.name, sanitize_for_log(project.repository)
                )
                self.clone(project.repository, path)
        except SyncError as e:
            logger.error("Error with repository %s: %s", project.name, e)
            return SyncResult(success=False, error=str(e), action=action)

        return SyncResult(success=True, path=path, action=action)

    def last_commit_date(self, name: str) -> datetime | None:
        """Get the commit date of a checkout's most recent commit.

        Returns:
            Commit date, or None if there is no checkout or git fails.
        """
        try:
            path = self.project_path(name)
        except SyncError:
            return None
        if not path.exists():
            return None

        try:
            output = self._run_git("log", "-1", "--format=%cI", cwd=path)
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.warning("Error getting last modified for %s: %s", name, e)
            return None

        if not output:
            return None
        try:
            return datetime.fromisoformat(output)
        except ValueError:
            logger.warning("Unexpected commit date for %s: %s", name, output)
            return None
