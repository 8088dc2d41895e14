"""
Tree loader — load a project and every module declared beneath it.

One recursive pass both fills the workspace and searches for the
project whose directory is the one the caller started from.
"""

from __future__ import annotations

import logging
from pathlib import Path

from localproject.core.config.settings import ResolverSettings
from localproject.core.models.project import LocalProject
from localproject.core.services.workspace import LocalWorkspace

logger = logging.getLogger(__name__)


def load_project_tree(
    workspace: LocalWorkspace,
    root_dir: Path,
    target_dir: Path | None,
    settings: ResolverSettings | None = None,
) -> LocalProject | None:
    """Load ``root_dir`` and its module tree into ``workspace``.

    Args:
        workspace: Registry every loaded project is added to.
        root_dir: Directory of the project at the top of this tree.
        target_dir: Directory being searched for. ``None`` means load only;
            the root project itself is then returned.
        settings: Resolver settings (descriptor name, source language).

    Returns:
        The first project whose directory equals ``target_dir`` (the
        root project when ``target_dir`` is None), or None.

    Raises:
        ResolutionError: Any module failing to load aborts the whole tree.
    """
    project = LocalProject.load(root_dir, workspace, settings)
    if target_dir is not None:
        target_dir = target_dir.resolve()

    result = project if target_dir is None or target_dir == project.dir else None
    if result is not None and target_dir is not None:
        logger.debug("Matched %s at %s", project.key, project.dir)

    # Only the first match counts; later siblings are loaded, not searched.
    search = None if result is not None else target_dir
    for module in project.descriptor.modules:
        loaded = load_project_tree(workspace, project.dir / module, search, settings)
        if loaded is not None and result is None:
            result = loaded
            search = None
    return result
