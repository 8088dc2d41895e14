"""
Local project resolver — CLI entrypoint.

Usage:
    localproject --help
    localproject resolve [DIR]
    localproject workspace [DIR]
    localproject locate [PATH]
    localproject roots [DIR]
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from localproject import __version__
from localproject.core.config.settings import ConfigError, load_settings
from localproject.core.observability.logging_config import cli_log_level, setup_logging_from_env


def _fail(message: str) -> None:
    click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="localproject")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--settings",
    "-s",
    "settings_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to localproject.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    settings_path: str | None,
) -> None:
    """Local project resolver — find and link local Maven workspaces."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    setup_logging_from_env(cli_log_level(verbose=verbose, quiet=quiet, debug=debug))

    try:
        ctx.obj["settings"] = load_settings(Path(settings_path) if settings_path else None)
    except ConfigError as e:
        _fail(str(e))


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False), default=".")
@click.option("--standalone", is_flag=True, help="Load only this project, no workspace.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, directory: str, standalone: bool, as_json: bool) -> None:
    """Resolve the local project in DIRECTORY."""
    from localproject.core.use_cases.resolve import resolve as run_resolve

    result = run_resolve(Path(directory), workspace=not standalone, settings=ctx.obj["settings"])

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        _fail(result.error)

    project = result.project
    assert project is not None  # guaranteed after error check above

    click.secho(f"\n📦 {project.app_artifact}", fg="cyan", bold=True)
    if not ctx.obj["quiet"]:
        click.echo(f"   Directory:  {project.dir}")
        click.echo(f"   Sources:    {project.sources_dir}")
        click.echo(f"   Resources:  {project.resources_dir}")
        click.echo(f"   Classes:    {project.classes_dir}")
    if result.workspace is not None:
        click.echo(f"   Workspace:  {len(result.workspace)} projects")
    click.echo()


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False), default=".")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def workspace(ctx: click.Context, directory: str, as_json: bool) -> None:
    """List every project in the workspace containing DIRECTORY."""
    from localproject.core.use_cases.resolve import resolve as run_resolve

    result = run_resolve(Path(directory), workspace=True, settings=ctx.obj["settings"])

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        _fail(result.error)

    ws = result.workspace
    assert ws is not None and result.project is not None

    click.secho(f"\n🗂  Workspace: {len(ws)} projects", fg="cyan", bold=True)
    for project in ws:
        marker = " ← current" if project is result.project else ""
        click.echo(f"     • {project.key}:{project.version}  → {project.dir}{marker}")
    click.echo()


@cli.command()
@click.argument("path", type=click.Path(), default=".")
@click.pass_context
def locate(ctx: click.Context, path: str) -> None:
    """Print the nearest directory above PATH holding a descriptor."""
    from localproject.core.errors import ResolutionError
    from localproject.core.services.locator import locate_nearest_project_dir

    try:
        found = locate_nearest_project_dir(Path(path), ctx.obj["settings"])
    except ResolutionError as e:
        _fail(str(e))
    else:
        click.echo(str(found))


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False), default=".")
@click.pass_context
def roots(ctx: click.Context, directory: str) -> None:
    """Print candidate workspace roots for DIRECTORY, outermost first."""
    from localproject.core.services.locator import locate_root_candidates

    candidates = locate_root_candidates(Path(directory), ctx.obj["settings"])
    if not candidates:
        _fail(f"No {ctx.obj['settings'].descriptor_name} found above {directory}")
    for candidate in candidates:
        click.echo(str(candidate))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
