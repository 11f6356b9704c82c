"""Data models for Git Manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class SyncAction(StrEnum):
    """What a sync did to the checkout."""

    CLONE = "clone"
    PULL = "pull"


@dataclass
class SyncResult:
    """Outcome of one clone-or-pull attempt.

    Attributes:
        success: Whether the checkout is now up to date.
        path: Checkout path (set on success).
        error: Git error message (set on failure).
        action: Whether a clone or a pull was attempted.
    """

    success: bool
    path: Path | None = None
    error: str | None = None
    action: SyncAction | None = None
