"""
Local workspace — registry of the projects loaded in one resolution.

A workspace is created fresh for each top-level resolution call and
filled in as the tree loader descends. It maps ``(groupId, artifactId)``
to the loaded LocalProject, so a build tool can substitute local build
output for artifacts it would otherwise fetch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from localproject.core.errors import DuplicateCoordinateError
from localproject.core.models.artifact import ArtifactKey

if TYPE_CHECKING:
    from localproject.core.models.project import LocalProject

logger = logging.getLogger(__name__)


class LocalWorkspace:
    """Coordinate-keyed registry of local projects."""

    def __init__(self) -> None:
        self._projects: dict[ArtifactKey, LocalProject] = {}
        self._last_modified: dict[ArtifactKey, float] = {}

    def add_project(self, project: LocalProject, last_modified: float | None = None) -> None:
        """Register a project under its key.

        ``last_modified`` is the descriptor's mtime. It is recorded for
        staleness checks but not interpreted here.

        Raises:
            DuplicateCoordinateError: If a different directory already
                holds the same key.
        """
        key = project.key
        existing = self._projects.get(key)
        if existing is not None and existing.dir != project.dir:
            raise DuplicateCoordinateError(
                f"Duplicate project {key}: {existing.dir} and {project.dir}",
                project.dir,
            )
        self._projects[key] = project
        if last_modified is not None:
            self._last_modified[key] = last_modified
        logger.debug("Registered %s at %s", key, project.dir)

    def get_project(
        self,
        group_id: str | ArtifactKey,
        artifact_id: str | None = None,
    ) -> LocalProject | None:
        """Look up a project by key or by ``(group_id, artifact_id)``."""
        if isinstance(group_id, ArtifactKey):
            key = group_id
        else:
            if artifact_id is None:
                raise TypeError("artifact_id is required when group_id is a string")
            key = ArtifactKey(group_id=group_id, artifact_id=artifact_id)
        return self._projects.get(key)

    @property
    def projects(self) -> Mapping[ArtifactKey, LocalProject]:
        """Read-only view of the registered projects."""
        return MappingProxyType(self._projects)

    def last_modified(self, key: ArtifactKey) -> float | None:
        return self._last_modified.get(key)

    def find_artifact(
        self,
        group_id: str,
        artifact_id: str,
        packaging: str = "jar",
    ) -> Path | None:
        """Locate the local file standing in for an artifact.

        For ``pom`` packaging that is the project's descriptor; otherwise
        the compiled classes directory, if it has been built.
        """
        project = self.get_project(group_id, artifact_id)
        if project is None:
            return None
        if packaging == "pom":
            return project.pom_file
        classes = project.classes_dir
        return classes if classes.is_dir() else None

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, key: object) -> bool:
        return key in self._projects

    def __iter__(self) -> Iterator[LocalProject]:
        return iter(self._projects.values())

    def to_dict(self) -> dict:
        return {
            "total": len(self),
            "projects": [p.to_dict() for p in self._projects.values()],
        }
