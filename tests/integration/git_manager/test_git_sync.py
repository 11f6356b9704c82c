"""Integration tests for GitManager against local repositories.

These tests require git on PATH.
"""

import shutil
import subprocess
from datetime import datetime
from pathlib import Path

import pytest

from dclauncher.config import ProjectDescriptor
from dclauncher.git_manager import GitManager, SyncAction

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git required"),
]


def commit_file(repo: Path, name: str, content: str) -> None:
    """Add a commit to an origin repository."""
    (repo / name).write_text(content, encoding="utf-8")
    subprocess.run(["git", "add", name], cwd=repo, check=True, capture_output=True)
    subprocess.run(
        ["git", "commit", "-q", "-m", f"Add {name}"], cwd=repo, check=True, capture_output=True
    )


@pytest.fixture
def manager(launcher_root: Path) -> GitManager:
    """GitManager over the launcher's projects directory."""
    return GitManager(launcher_root / "projects")


@pytest.mark.integration
class TestSync:
    """Clone and pull with real git."""

    def test_first_sync_clones(self, manager: GitManager, git_origin) -> None:
        """A missing checkout is cloned."""
        origin = git_origin("shop")
        project = ProjectDescriptor(name="shop", repository=str(origin))

        result = manager.sync(project)

        assert result.success
        assert result.action == SyncAction.CLONE
        assert result.path == manager.projects_dir / "shop"
        assert (result.path / "docker-compose.yaml").exists()

    def test_second_sync_pulls_new_commits(self, manager: GitManager, git_origin) -> None:
        """An existing checkout is fast-forwarded."""
        origin = git_origin("shop")
        project = ProjectDescriptor(name="shop", repository=str(origin))
        manager.sync(project)
        commit_file(origin, "README.md", "# shop\n")

        result = manager.sync(project)

        assert result.success
        assert result.action == SyncAction.PULL
        assert (result.path / "README.md").read_text() == "# shop\n"

    def test_unknown_repository_fails(self, manager: GitManager, tmp_path: Path) -> None:
        """Cloning a missing repository reports git's error."""
        project = ProjectDescriptor(name="ghost", repository=str(tmp_path / "does-not-exist"))

        result = manager.sync(project)

        assert not result.success
        assert result.action == SyncAction.CLONE
        assert result.error
        assert not (manager.projects_dir / "ghost").exists()

    def test_repository_is_never_an_option(self, manager: GitManager, tmp_path: Path) -> None:
        """A repository value starting with "-" is treated as a location, not a flag."""
        marker = tmp_path / "marker"
        project = ProjectDescriptor(name="odd", repository=f"--upload-pack=touch {marker}")

        result = manager.sync(project)

        assert not result.success
        assert not marker.exists()

    def test_last_commit_date(self, manager: GitManager, git_origin) -> None:
        """The checkout's head commit date is reported."""
        origin = git_origin("app")
        manager.sync(ProjectDescriptor(name="app", repository=str(origin)))

        committed = manager.last_commit_date("app")

        assert isinstance(committed, datetime)
        assert committed.tzinfo is not None
