"""Custom exceptions for build workers."""


class WorkerError(Exception):
    """Base exception for worker errors."""


class BuildError(WorkerError):
    """A build or run command failed."""


class ArtifactNotFoundError(BuildError):
    """The build succeeded but its expected output is missing."""
