"""
Resolve use case — find the local project for a directory.

Two entry points:
    - resolve_project(dir): the project at ``dir`` alone, no workspace.
    - resolve_project_with_workspace(dir): the project at ``dir`` plus
      every project of the workspace it belongs to.

``resolve()`` wraps both into a result object for the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from localproject.core.config.settings import ResolverSettings
from localproject.core.errors import (
    DescriptorNotFoundError,
    ProjectNotFoundInWorkspaceError,
    ResolutionError,
)
from localproject.core.models.project import LocalProject
from localproject.core.services.locator import locate_root_candidates
from localproject.core.services.tree_loader import load_project_tree
from localproject.core.services.workspace import LocalWorkspace

logger = logging.getLogger(__name__)


def resolve_project(
    project_dir: Path,
    settings: ResolverSettings | None = None,
) -> LocalProject:
    """Load the project at ``project_dir`` without workspace semantics.

    Raises:
        ResolutionError: If the descriptor can't be read or lacks coordinates.
    """
    try:
        return LocalProject.load(project_dir, None, settings)
    except OSError as e:
        raise ResolutionError(
            f"Failed to resolve local project for {project_dir}: {e}", project_dir
        ) from e


def resolve_project_with_workspace(
    start_dir: Path,
    settings: ResolverSettings | None = None,
) -> LocalProject:
    """Load the workspace containing ``start_dir`` and return its project.

    Candidate roots are tried outermost first, each with a fresh
    workspace. The first root whose module tree reaches ``start_dir``
    wins; its workspace is reachable through ``project.workspace``.

    Raises:
        DescriptorNotFoundError: If no descriptor exists above ``start_dir``.
        ProjectNotFoundInWorkspaceError: If no candidate tree reaches it.
        ResolutionError: On any failure while loading a tree.
    """
    try:
        roots = locate_root_candidates(start_dir, settings)
        if not roots:
            raise DescriptorNotFoundError(
                f"Failed to locate a project descriptor for {start_dir}", start_dir
            )

        for root_dir in roots:
            workspace = LocalWorkspace()
            project = load_project_tree(workspace, root_dir, start_dir, settings)
            if project is not None:
                logger.info(
                    "Resolved %s in workspace %s (%d projects)",
                    project.key, root_dir, len(workspace),
                )
                return project
            logger.debug("Root %s does not reach %s", root_dir, start_dir)
    except OSError as e:
        raise ResolutionError(
            f"Failed to resolve local projects for {start_dir}: {e}", start_dir
        ) from e

    raise ProjectNotFoundInWorkspaceError(
        f"Failed to locate {start_dir} among the loaded local projects", start_dir
    )


@dataclass
class ResolveResult:
    """Result of the resolve use case."""

    project: LocalProject | None = None
    workspace: LocalWorkspace | None = None
    error: str | None = None
    error_type: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            result["error_type"] = self.error_type
            return result

        if self.project:
            result["project"] = self.project.to_dict()
        if self.workspace is not None:
            result["workspace"] = self.workspace.to_dict()
        return result


def resolve(
    project_dir: Path | None = None,
    workspace: bool = True,
    settings: ResolverSettings | None = None,
) -> ResolveResult:
    """Resolve the project at ``project_dir`` (default: cwd).

    Never raises ResolutionError; failures land in ``result.error``.
    """
    project_dir = project_dir or Path.cwd()
    try:
        if workspace:
            project = resolve_project_with_workspace(project_dir, settings)
        else:
            project = resolve_project(project_dir, settings)
    except ResolutionError as e:
        return ResolveResult(error=str(e), error_type=type(e).__name__)

    return ResolveResult(project=project, workspace=project.workspace)
