"""DCLauncher - Launch and monitor docker compose and Android projects."""

__version__ = "0.1.0"
