"""Subprocess execution with bounded output capture.

Commands are always run from an argument vector with an explicit working
directory; nothing goes through a shell.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dclauncher.logging import truncate_output

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from pathlib import Path

logger = logging.getLogger("dclauncher.process")

# Build logs up to this size are captured; anything larger is a failure
DEFAULT_MAX_OUTPUT = 10 * 1024 * 1024  # 10MB
READ_CHUNK_SIZE = 64 * 1024


class CommandError(Exception):
    """A command exited with a non-zero status."""

    def __init__(self, message: str, returncode: int | None = None, output: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class ToolNotFoundError(CommandError):
    """The executable is not installed or not in PATH."""


class OutputLimitExceededError(CommandError):
    """A command produced more output than the capture limit."""


@dataclass
class CommandResult:
    """Result of a finished command.

    Attributes:
        returncode: Process exit status.
        output: Combined stdout and stderr.
    """

    returncode: int
    output: str


def format_command(args: Sequence[str]) -> str:
    return shlex.join(args)


def run_command(
    args: Sequence[str],
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    max_output: int = DEFAULT_MAX_OUTPUT,
    timeout: float | None = None,
    line_callback: Callable[[str], None] | None = None,
) -> CommandResult:
    """Run a command, streaming its combined output.

    Args:
        args: Command and arguments.
        cwd: Working directory for the command.
        env: Full environment for the command (inherits ours if None).
        max_output: Maximum bytes of output to capture.
        timeout: Seconds to wait for exit after output ends (None = forever).
        line_callback: Called with every output line as it arrives.

    Returns:
        CommandResult for a zero exit status.

    Raises:
        ToolNotFoundError: If the executable does not exist.
        OutputLimitExceededError: If output exceeds max_output; the process is killed.
        CommandError: If the command exits non-zero or times out.
    """
    command = format_command(args)
    logger.debug("Running %s (cwd=%s)", command, cwd)

    try:
        process = subprocess.Popen(
            list(args),
            cwd=cwd,
            env=dict(env) if env is not None else None,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except FileNotFoundError as e:
        raise ToolNotFoundError(f"{args[0]} is not installed or not in PATH") from e
    except OSError as e:
        raise CommandError(f"Failed to execute {command}: {e}") from e

    chunks: list[bytes] = []
    captured = 0
    pending = b""
    try:
        if process.stdout:
            while chunk := process.stdout.read1(READ_CHUNK_SIZE):
                captured += len(chunk)
                if captured > max_output:
                    process.kill()
                    process.wait()
                    partial = b"".join(chunks).decode("utf-8", errors="replace")
                    raise OutputLimitExceededError(
                        f"Command failed: {command}\nOutput exceeded {max_output} bytes",
                        returncode=process.returncode,
                        output=partial,
                    )
                chunks.append(chunk)
                if line_callback:
                    *lines, pending = (pending + chunk).split(b"\n")
                    for line in lines:
                        line_callback(line.decode("utf-8", errors="replace"))

            if line_callback and pending:
                line_callback(pending.decode("utf-8", errors="replace"))

        process.wait(timeout=timeout)
    except subprocess.TimeoutExpired as e:
        process.kill()
        process.wait()
        output = b"".join(chunks).decode("utf-8", errors="replace")
        raise CommandError(
            f"Command timed out after {timeout} seconds: {command}", output=output
        ) from e
    finally:
        if process.stdout:
            process.stdout.close()

    output = b"".join(chunks).decode("utf-8", errors="replace")
    if process.returncode != 0:
        message = f"Command failed: {command}"
        if output.strip():
            message += f"\n{truncate_output(output.strip())}"
        raise CommandError(message, returncode=process.returncode, output=output)

    return CommandResult(returncode=process.returncode, output=output)
