"""Compose Worker - Builds and starts docker compose projects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dclauncher.logging import truncate_output
from dclauncher.process import DEFAULT_MAX_OUTPUT, CommandError, run_command
from dclauncher.workers.diagnostics import classify_compose_error
from dclauncher.workers.models import StageResult

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

logger = logging.getLogger("dclauncher.workers.compose")

COMPOSE_UP_ARGS = ("docker", "compose", "up", "--build", "-d")


class ComposeWorker:
    """Worker that runs `docker compose up --build -d` in a project checkout.

    Failures are returned as a StageResult whose error carries a
    remediation hint for recognized problems (missing base images,
    port conflicts) or the raw error text otherwise.
    """

    def __init__(
        self,
        max_output: int = DEFAULT_MAX_OUTPUT,
        timeout: float | None = None,
    ) -> None:
        """Initialize the Compose Worker.

        Args:
            max_output: Maximum bytes of compose output to capture.
            timeout: Optional timeout in seconds (None = wait forever).
        """
        self.max_output = max_output
        self.timeout = timeout
        self.log_callback: Callable[[str], None] | None = None

    def execute(self, project_path: Path, project_name: str) -> StageResult:
        """Build and start a project's compose services.

        Args:
            project_path: Checkout directory containing the compose file.
            project_name: Project name, used in remediation hints.

        Returns:
            StageResult with output on success or a classified error.
        """
        logger.info("Running docker compose for %s...", project_name)
        try:
            result = run_command(
                COMPOSE_UP_ARGS,
                cwd=project_path,
                max_output=self.max_output,
                timeout=self.timeout,
                line_callback=self.log_callback,
            )
        except CommandError as e:
            error_text = str(e)
            tail = truncate_output(e.output.strip())
            if tail and tail not in error_text:
                error_text += f"\n{tail}"
            logger.error(
                "Error running docker compose for %s: %s", project_name, truncate_output(error_text)
            )
            return StageResult(
                success=False,
                error=classify_compose_error(error_text, project_name),
            )

        logger.info("docker compose up finished for %s", project_name)
        logger.debug("Compose output: %s", truncate_output(result.output))
        return StageResult(success=True, output=result.output)
