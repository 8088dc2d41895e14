"""
Domain models — Pydantic types for descriptors and artifact identity.

    from localproject.core.models import ArtifactKey, Descriptor

``LocalProject`` lives in ``localproject.core.models.project``; it reads
descriptors on load and is kept out of this namespace to avoid an
import cycle with the descriptor reader.
"""

from localproject.core.models.artifact import AppArtifact, ArtifactKey
from localproject.core.models.descriptor import (
    BuildSection,
    Descriptor,
    ParentRef,
    ResourceDir,
)

__all__ = [
    # artifact.py
    "AppArtifact",
    "ArtifactKey",
    # descriptor.py
    "BuildSection",
    "Descriptor",
    "ParentRef",
    "ResourceDir",
]
