"""Shared pytest fixtures and configuration."""

import json
import subprocess
from pathlib import Path

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep log files written by setup_logging out of the working directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("DCLAUNCHER_LOG_DIR", str(log_dir))
    return log_dir


@pytest.fixture
def launcher_root(tmp_path: Path) -> Path:
    """Launcher root with an empty projects directory."""
    (tmp_path / "projects").mkdir()
    return tmp_path


@pytest.fixture
def write_config():
    """Return a helper that writes a projects.json file."""

    def _write(path: Path, projects: list[dict]) -> Path:
        path.write_text(json.dumps({"projects": projects}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def git_origin(tmp_path: Path):
    """Return a helper that creates a local repository to clone from.

    The repository gets a docker-compose.yaml and one commit.
    """

    def _run(*args: str, cwd: Path) -> None:
        subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)

    def _create(name: str = "origin") -> Path:
        repo = tmp_path / "origins" / name
        repo.mkdir(parents=True)
        _run("init", "-q", cwd=repo)
        _run("config", "user.email", "test@example.com", cwd=repo)
        _run("config", "user.name", "Test User", cwd=repo)
        (repo / "docker-compose.yaml").write_text("services: {}\n", encoding="utf-8")
        _run("add", ".", cwd=repo)
        _run("commit", "-q", "-m", "Initial commit", cwd=repo)
        return repo

    return _create
