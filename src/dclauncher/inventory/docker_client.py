"""DockerClient - Read-only access to the Docker Engine API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dclauncher.config.models import DEFAULT_DOCKER_SOCKET
from dclauncher.inventory.exceptions import ContainerRuntimeError

logger = logging.getLogger("dclauncher.inventory.docker")


class DockerClient:
    """Queries the Docker Engine API over its unix socket."""

    def __init__(
        self,
        socket_path: str = DEFAULT_DOCKER_SOCKET,
        base_url: str = "http://docker",
        timeout: float = 10.0,
    ) -> None:
        """Initialize the Docker client.

        Args:
            socket_path: Path to the Docker daemon socket.
            base_url: Base URL for requests (the host part is ignored by the socket).
            timeout: Request timeout in seconds.
        """
        self.socket_path = socket_path
        self.base_url = base_url
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create the HTTP client for the Docker API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                transport=httpx.HTTPTransport(uds=self.socket_path),
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def list_containers(self) -> list[dict[str, Any]]:
        """List running containers.

        Returns:
            Container summaries as returned by `GET /containers/json`.

        Raises:
            ContainerRuntimeError: If the daemon is unreachable or errors.
        """
        try:
            response = self.client.get("/containers/json")
        except httpx.HTTPError as e:
            logger.error("Failed to reach Docker at %s: %s", self.socket_path, e)
            raise ContainerRuntimeError(f"Failed to reach Docker daemon: {e}") from e

        if response.status_code != 200:
            logger.error("Failed to list containers: %s", response.text)
            raise ContainerRuntimeError(
                f"Failed to list containers: {response.status_code} - {response.text}"
            )
        return response.json()
