"""Unit tests for Android routes."""

from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dclauncher.api import create_app
from dclauncher.api.dependencies import get_device_bridge, get_orchestrator
from dclauncher.config import ConfigurationError, LauncherSettings
from dclauncher.devices import Device, DeviceListing
from dclauncher.orchestrator import AndroidProjectStatus, CloneResult
from dclauncher.workers import InstallResult


@pytest.fixture
def mock_orchestrator() -> MagicMock:
    """Create a mock Orchestrator."""
    return MagicMock()


@pytest.fixture
def mock_bridge() -> MagicMock:
    """Create a mock DeviceBridge."""
    return MagicMock()


@pytest.fixture
def app(launcher_root: Path, mock_orchestrator: MagicMock, mock_bridge: MagicMock):
    """Create the app with mocked services."""
    app = create_app(LauncherSettings.from_root(launcher_root))
    app.state.services = MagicMock()

    app.dependency_overrides[get_orchestrator] = lambda: mock_orchestrator
    app.dependency_overrides[get_device_bridge] = lambda: mock_bridge
    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.unit
class TestListAndroidProjects:
    """Tests for GET /api/android/projects."""

    def test_lists_statuses(self, client: TestClient, mock_orchestrator: MagicMock) -> None:
        """Statuses are a plain list with camelCase lastModified."""
        mock_orchestrator.android_project_statuses.return_value = [
            AndroidProjectStatus(
                name="app",
                repository="https://example.com/app.git",
                exists=True,
                last_modified=datetime(2025, 3, 1, 12, 0, tzinfo=UTC),
                path=Path("/srv/projects/app"),
            ),
            AndroidProjectStatus(
                name="wear",
                repository="https://example.com/wear.git",
                exists=False,
                last_modified=None,
                path=Path("/srv/projects/wear"),
            ),
        ]

        response = client.get("/api/android/projects")

        assert response.status_code == 200
        app_status, wear_status = response.json()
        assert app_status == {
            "name": "app",
            "repository": "https://example.com/app.git",
            "exists": True,
            "lastModified": "2025-03-01T12:00:00Z",
            "path": "/srv/projects/app",
        }
        assert wear_status["exists"] is False
        assert wear_status["lastModified"] is None

    def test_configuration_error(self, client: TestClient, mock_orchestrator: MagicMock) -> None:
        """A broken configuration is a 500."""
        mock_orchestrator.android_project_statuses.side_effect = ConfigurationError("bad config")

        response = client.get("/api/android/projects")

        assert response.status_code == 500
        assert response.json() == {"error": "bad config"}


@pytest.mark.unit
class TestListDevices:
    """Tests for GET /api/android/devices."""

    def test_lists_devices(self, client: TestClient, mock_bridge: MagicMock) -> None:
        """Connected devices are returned."""
        mock_bridge.list_devices.return_value = DeviceListing(
            success=True, devices=[Device(serial="ABC123", model="bar", product="foo")]
        )

        response = client.get("/api/android/devices")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "devices": [
                {"serial": "ABC123", "model": "bar", "product": "foo", "status": "connected"}
            ],
            "error": None,
        }

    def test_adb_missing(self, client: TestClient, mock_bridge: MagicMock) -> None:
        """A missing adb is reported in the body, not as a server error."""
        mock_bridge.list_devices.return_value = DeviceListing(
            success=False, error="ADB is not installed or not in PATH"
        )

        response = client.get("/api/android/devices")

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["devices"] == []
        assert response.json()["error"] == "ADB is not installed or not in PATH"


@pytest.mark.unit
class TestCloneAll:
    """Tests for POST /api/android/clone."""

    def test_returns_per_project_results(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """Each project's sync outcome is listed."""
        mock_orchestrator.clone_android_projects.return_value = [
            CloneResult(name="app", success=True, path=Path("/srv/projects/app")),
            CloneResult(name="wear", success=False, error="auth failed"),
        ]

        response = client.post("/api/android/clone")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "results": [
                {"name": "app", "success": True, "path": "/srv/projects/app", "error": None},
                {"name": "wear", "success": False, "path": None, "error": "auth failed"},
            ],
        }


@pytest.mark.unit
class TestInstall:
    """Tests for POST /api/android/install."""

    def test_installs(self, client: TestClient, mock_orchestrator: MagicMock) -> None:
        """Successful installs return the message and build output."""
        mock_orchestrator.install_android_project.return_value = InstallResult(
            success=True,
            message="Successfully built and installed app on device ABC123",
            output="BUILD SUCCESSFUL",
        )

        response = client.post(
            "/api/android/install", json={"projectName": "app", "deviceSerial": "ABC123"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Successfully built and installed app on device ABC123",
            "output": "BUILD SUCCESSFUL",
        }
        mock_orchestrator.install_android_project.assert_called_once_with("app", "ABC123")

    def test_apk_path_is_camel_case(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """The installed APK is reported as apkPath."""
        mock_orchestrator.install_android_project.return_value = InstallResult(
            success=True,
            message="ok",
            apk_path=Path("/srv/projects/app/app/build/outputs/apk/debug/app-debug.apk"),
        )

        response = client.post(
            "/api/android/install", json={"projectName": "app", "deviceSerial": "ABC123"}
        )

        assert response.json()["apkPath"].endswith("app-debug.apk")

    def test_failure_is_200_with_error(
        self, client: TestClient, mock_orchestrator: MagicMock
    ) -> None:
        """Build failures are reported in the body."""
        mock_orchestrator.install_android_project.return_value = InstallResult(
            success=False, error="Command failed: ./gradlew installDebug", stderr="FAILURE"
        )

        response = client.post(
            "/api/android/install", json={"projectName": "app", "deviceSerial": "ABC123"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "error": "Command failed: ./gradlew installDebug",
            "stderr": "FAILURE",
        }

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"projectName": "app"},
            {"deviceSerial": "ABC123"},
            {"projectName": "", "deviceSerial": "ABC123"},
        ],
    )
    def test_missing_fields(
        self, client: TestClient, mock_orchestrator: MagicMock, body: dict
    ) -> None:
        """Both projectName and deviceSerial are required."""
        response = client.post("/api/android/install", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "projectName and deviceSerial are required",
        }
        mock_orchestrator.install_android_project.assert_not_called()

    @pytest.mark.parametrize(
        "body",
        [
            {"projectName": 5, "deviceSerial": "ABC123"},
            {"projectName": "app", "deviceSerial": ["ABC123"]},
            [],
            "app",
            None,
        ],
    )
    def test_malformed_body(self, client: TestClient, mock_orchestrator: MagicMock, body) -> None:
        """Bodies of the wrong shape get the same 400 as missing fields."""
        response = client.post("/api/android/install", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "projectName and deviceSerial are required",
        }
        mock_orchestrator.install_android_project.assert_not_called()

    def test_no_body(self, client: TestClient, mock_orchestrator: MagicMock) -> None:
        """A request without any body is a 400, not a validation error."""
        response = client.post("/api/android/install")

        assert response.status_code == 400
        assert response.json()["error"] == "projectName and deviceSerial are required"
        mock_orchestrator.install_android_project.assert_not_called()
