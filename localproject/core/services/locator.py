"""
Root locator — find the directories holding a descriptor above a path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from localproject.core.config.settings import DEFAULT_SETTINGS, ResolverSettings
from localproject.core.errors import DescriptorNotFoundError

logger = logging.getLogger(__name__)


def locate_root_candidates(
    start_dir: Path,
    settings: ResolverSettings | None = None,
) -> list[Path]:
    """Return every directory from ``start_dir`` up that contains a descriptor.

    The list runs from the topmost ancestor down to ``start_dir`` itself
    (included when it has a descriptor). Empty when none is found.
    """
    name = (settings or DEFAULT_SETTINGS).descriptor_name
    found: list[Path] = []
    current = start_dir.resolve()

    while True:
        if (current / name).exists():
            found.append(current)
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    found.reverse()
    logger.debug("Discovered %s files in %s", name, [str(p) for p in found])
    return found


def locate_nearest_project_dir(
    path: Path,
    settings: ResolverSettings | None = None,
) -> Path:
    """Return the nearest directory from ``path`` up that contains a descriptor.

    Raises:
        DescriptorNotFoundError: If the filesystem root is reached first.
    """
    name = (settings or DEFAULT_SETTINGS).descriptor_name
    current = path.resolve()

    while True:
        if (current / name).exists():
            return current
        parent = current.parent
        if parent == current:
            raise DescriptorNotFoundError(f"Failed to locate project {name} for {path}", path)
        current = parent
