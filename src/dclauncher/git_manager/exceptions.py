"""Custom exceptions for Git Manager."""


class GitManagerError(Exception):
    """Base exception for Git Manager errors."""


class SyncError(GitManagerError):
    """Error bringing a project checkout up to date."""


class CloneError(SyncError):
    """Error cloning a repository."""


class PullError(SyncError):
    """Error pulling into an existing checkout."""
