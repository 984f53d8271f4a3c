from __future__ import annotations


class DevdocsError(RuntimeError):
    """Base error for failures that abort `devdocs init`."""


class ReconcileError(DevdocsError):
    """Raised when a filesystem read/write/mkdir on a target artifact fails."""


class TrackerError(DevdocsError):
    """Raised when the external tracker executable fails or cannot be started."""


class TemplateNotFoundError(DevdocsError):
    """Raised when a template key has no shipped content."""
