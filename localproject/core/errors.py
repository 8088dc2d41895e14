"""
Resolution errors — everything the resolver can fail with.

Every error carries the path it was raised for, so callers can report
*where* discovery broke without parsing the message.
"""

from __future__ import annotations

from pathlib import Path


class ResolutionError(Exception):
    """Base class for local project resolution failures."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DescriptorNotFoundError(ResolutionError):
    """No descriptor file found walking up from a path."""


class DescriptorReadError(ResolutionError):
    """A descriptor exists (or was expected) but could not be read or parsed."""


class MissingCoordinateError(ResolutionError):
    """Neither the descriptor nor its parent reference supplies a coordinate."""


class ProjectNotFoundInWorkspaceError(ResolutionError):
    """No candidate root's module tree reaches the requested directory."""


class DuplicateCoordinateError(ResolutionError):
    """Two project directories in one workspace share a (groupId, artifactId)."""
