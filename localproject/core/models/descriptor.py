"""
Descriptor model — the parsed contents of a project's pom.xml.

Only the parts the resolver needs are modelled: coordinates, the parent
reference, declared modules and the build path overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ParentRef(BaseModel):
    """The ``<parent>`` reference a descriptor may inherit coordinates from."""

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    relative_path: str | None = None


class ResourceDir(BaseModel):
    """A ``<resource>`` entry under ``<build><resources>``."""

    directory: str


class BuildSection(BaseModel):
    """Path overrides from the ``<build>`` element."""

    directory: str | None = None          # output dir, normally "target"
    output_directory: str | None = None   # compiled classes
    source_directory: str | None = None
    resources: list[ResourceDir] = Field(default_factory=list)


class Descriptor(BaseModel):
    """A project descriptor as read from disk.

    ``group_id`` and ``version`` may be absent here; the project record
    falls back to the parent reference for them.
    """

    artifact_id: str
    group_id: str | None = None
    version: str | None = None
    packaging: str = "jar"
    name: str | None = None

    parent: ParentRef | None = None
    modules: list[str] = Field(default_factory=list)
    build: BuildSection | None = None

    pom_file: Path | None = None
