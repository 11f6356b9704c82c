"""Custom exceptions for the container inventory."""


class InventoryError(Exception):
    """Base exception for inventory errors."""


class ContainerRuntimeError(InventoryError):
    """The container runtime could not be queried."""
