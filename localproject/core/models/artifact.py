"""
Artifact identity — the keys under which local projects are registered.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ArtifactKey(BaseModel):
    """(groupId, artifactId) — unique within a workspace. Version is excluded."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


class AppArtifact(BaseModel):
    """A fully coordinated artifact pointing at its local build output."""

    group_id: str
    artifact_id: str
    classifier: str = ""
    type: str = "jar"
    version: str
    path: Path | None = None

    @property
    def key(self) -> ArtifactKey:
        return ArtifactKey(group_id=self.group_id, artifact_id=self.artifact_id)

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id]
        if self.classifier:
            parts.append(self.classifier)
        parts.extend([self.type, self.version])
        return ":".join(parts)
