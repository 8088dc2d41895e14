"""
Local project model — one buildable module found on disk.

A LocalProject pairs a directory with its parsed descriptor and the
coordinates resolved from it. Output and source locations are derived
on access: the descriptor's ``<build>`` overrides win, otherwise the
Maven conventions apply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from localproject.core.config.descriptor_reader import read_descriptor
from localproject.core.config.settings import DEFAULT_SETTINGS, ResolverSettings
from localproject.core.errors import MissingCoordinateError
from localproject.core.models.artifact import AppArtifact, ArtifactKey
from localproject.core.models.descriptor import Descriptor

if TYPE_CHECKING:
    from localproject.core.services.workspace import LocalWorkspace

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class LocalProject:
    """A local project record.

    Build one with :meth:`load`, which reads the descriptor and, when a
    workspace is given, registers the record in it.
    """

    dir: Path
    descriptor: Descriptor
    group_id: str
    artifact_id: str
    version: str
    workspace: LocalWorkspace | None = field(default=None, repr=False)
    settings: ResolverSettings = field(default=DEFAULT_SETTINGS, repr=False)

    @classmethod
    def load(
        cls,
        directory: Path,
        workspace: LocalWorkspace | None = None,
        settings: ResolverSettings | None = None,
    ) -> LocalProject:
        """Read ``<directory>/pom.xml`` and build the record.

        Raises:
            DescriptorReadError: If the descriptor can't be read.
            MissingCoordinateError: If groupId or version can't be resolved.
            DuplicateCoordinateError: If the workspace already holds the key.
        """
        settings = settings or DEFAULT_SETTINGS
        directory = directory.resolve()
        pom_file = directory / settings.descriptor_name
        descriptor = read_descriptor(pom_file)

        project = cls(
            dir=directory,
            descriptor=descriptor,
            group_id=_inherit(descriptor, "group_id", pom_file),
            artifact_id=descriptor.artifact_id,
            version=_inherit(descriptor, "version", pom_file),
            workspace=workspace,
            settings=settings,
        )
        if workspace is not None:
            workspace.add_project(project, pom_file.stat().st_mtime)
        return project

    # ── Identity ────────────────────────────────────────────────

    @property
    def key(self) -> ArtifactKey:
        return ArtifactKey(group_id=self.group_id, artifact_id=self.artifact_id)

    @property
    def pom_file(self) -> Path:
        return self.dir / self.settings.descriptor_name

    @property
    def app_artifact(self) -> AppArtifact:
        """The artifact this project builds, pointing at its classes dir."""
        return AppArtifact(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            type=self.descriptor.packaging,
            version=self.version,
            path=self.classes_dir,
        )

    # ── Derived paths ───────────────────────────────────────────

    @property
    def output_dir(self) -> Path:
        build = self.descriptor.build
        if build is not None and build.directory:
            return self.dir / build.directory
        return self.dir / "target"

    @property
    def classes_dir(self) -> Path:
        build = self.descriptor.build
        if build is not None and build.output_directory:
            return self.dir / build.output_directory
        return self.output_dir / "classes"

    @property
    def sources_dir(self) -> Path:
        build = self.descriptor.build
        if build is not None and build.source_directory:
            return self.dir / build.source_directory
        return self.dir / "src" / "main" / self.settings.source_language

    @property
    def resources_dirs(self) -> list[Path]:
        build = self.descriptor.build
        if build is not None and build.resources:
            return [self.dir / r.directory for r in build.resources]
        return [self.dir / "src" / "main" / "resources"]

    @property
    def resources_dir(self) -> Path:
        """The primary resources directory (first declared one)."""
        return self.resources_dirs[0]

    def to_dict(self) -> dict:
        return {
            "group_id": self.group_id,
            "artifact_id": self.artifact_id,
            "version": self.version,
            "packaging": self.descriptor.packaging,
            "dir": str(self.dir),
            "output_dir": str(self.output_dir),
            "classes_dir": str(self.classes_dir),
            "sources_dir": str(self.sources_dir),
            "resources_dirs": [str(p) for p in self.resources_dirs],
            "modules": list(self.descriptor.modules),
        }


def _inherit(descriptor: Descriptor, attr: str, pom_file: Path) -> str:
    """Take a coordinate from the descriptor, falling back to its parent."""
    value = getattr(descriptor, attr)
    if value is not None:
        return value
    if descriptor.parent is None or getattr(descriptor.parent, attr) is None:
        label = "groupId" if attr == "group_id" else attr
        raise MissingCoordinateError(f"Failed to determine {label} for {pom_file}", pom_file)
    return getattr(descriptor.parent, attr)
