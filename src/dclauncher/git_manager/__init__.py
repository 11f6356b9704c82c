"""Git Manager - Clones and updates project checkouts."""

from dclauncher.git_manager.exceptions import (
    CloneError,
    GitManagerError,
    PullError,
    SyncError,
)
from dclauncher.git_manager.manager import GitManager
from dclauncher.git_manager.models import SyncAction, SyncResult

__all__ = [
    "CloneError",
    "GitManager",
    "GitManagerError",
    "PullError",
    "SyncAction",
    "SyncError",
    "SyncResult",
]
