"""CLI entry point for temporal-rbac.

Invoked as::

    temporal-rbac [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m temporal_rbac.cli.main

Commands
--------
- version  — Show detailed version information
- plugins  — List all registered role managers
- check    — Ask whether one role contains another at a point in time
- roles    — List the direct roles of a name
- users    — List the names directly holding a role
- show     — Show every role and its sessions

Links files
-----------
All inspection commands read a YAML document of the form::

    config:
      max_hierarchy_level: 10
    links:
      - {source: alice, target: admin, start: 2020-01-01, end: 2020-12-31}

Unquoted YAML dates and datetimes are converted to ISO-8601 strings.
"""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import click
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console
from rich.table import Table

from temporal_rbac.rbac.config import ManagerConfig
from temporal_rbac.rbac.manager import SessionRoleManager

console = Console()

# ---------------------------------------------------------------------------
# Links file loading
# ---------------------------------------------------------------------------


class LinkRecord(BaseModel):
    """One ``add_link`` call read from a links file."""

    source: str
    target: str
    start: str
    end: str

    @field_validator("start", "end", mode="before")
    @classmethod
    def _timestamp_to_str(cls, value: object) -> object:
        # YAML loads unquoted ISO dates and datetimes as date objects.
        if isinstance(value, date):
            return value.isoformat()
        return value


class LinksDocument(BaseModel):
    """Top-level structure of a links file."""

    config: dict[str, object] | None = None
    links: list[LinkRecord] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def _empty_links(cls, value: object) -> object:
        return [] if value is None else value


def _load_manager(links_file: str, max_depth: int | None) -> SessionRoleManager:
    """Build a ``SessionRoleManager`` populated from ``links_file``.

    Parameters
    ----------
    links_file:
        Path to a YAML links document.
    max_depth:
        When given, overrides ``config.max_hierarchy_level`` from the file.

    Returns
    -------
    SessionRoleManager
        A manager holding every link from the file, in file order.
    """
    try:
        raw = yaml.safe_load(Path(links_file).read_text(encoding="utf-8")) or {}
        document = LinksDocument.model_validate(raw)
        config = ManagerConfig.from_mapping(document.config)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        console.print(f"[red]Failed to load links file:[/red] {exc}")
        sys.exit(1)

    manager = SessionRoleManager(max_depth, config=config)
    for link in document.links:
        manager.add_link(link.source, link.target, link.start, link.end)
    return manager


_max_depth_option = click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Override the hierarchy depth bound from the links file.",
)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="temporal-rbac")
def cli() -> None:
    """Time-windowed role hierarchy inspection"""


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from temporal_rbac import __version__

    console.print(f"[bold]temporal-rbac[/bold] v{__version__}")


# ---------------------------------------------------------------------------
# plugins
# ---------------------------------------------------------------------------


@cli.command(name="plugins")
def plugins_command() -> None:
    """List all registered role managers, including entry-point plugins."""
    from temporal_rbac.rbac.factory import ENTRYPOINT_GROUP, role_manager_registry

    role_manager_registry.load_entrypoints(ENTRYPOINT_GROUP)
    console.print("[bold]Registered role managers:[/bold]")
    for name in role_manager_registry.list_plugins():
        cls = role_manager_registry.get(name)
        console.print(f"  {name}  [dim]{cls.__module__}.{cls.__name__}[/dim]")


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("links_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("source")
@click.argument("target")
@click.argument("request_time")
@_max_depth_option
def check_command(
    links_file: str,
    source: str,
    target: str,
    request_time: str,
    max_depth: int | None,
) -> None:
    """Check whether SOURCE contains TARGET at REQUEST_TIME.

    Exits with status 0 when it does and 1 when it does not.
    """
    manager = _load_manager(links_file, max_depth)
    if manager.has_link(source, target, request_time):
        console.print(f"[green]yes[/green] {source} contains {target} at {request_time}")
        return
    console.print(f"[red]no[/red] {source} does not contain {target} at {request_time}")
    sys.exit(1)


# ---------------------------------------------------------------------------
# roles / users
# ---------------------------------------------------------------------------


@cli.command(name="roles")
@click.argument("links_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
def roles_command(links_file: str, name: str) -> None:
    """List the roles NAME holds directly, regardless of time."""
    manager = _load_manager(links_file, None)
    roles = manager.get_roles(name)
    if not roles:
        console.print(f"[yellow]No roles found for:[/yellow] {name}")
        return
    for role in roles:
        console.print(role)


@cli.command(name="users")
@click.argument("links_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
def users_command(links_file: str, name: str) -> None:
    """List the names holding NAME directly, regardless of time."""
    manager = _load_manager(links_file, None)
    users = manager.get_users(name)
    if not users:
        console.print(f"[yellow]No users found for:[/yellow] {name}")
        return
    for user in users:
        console.print(user)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("links_file", type=click.Path(exists=True, dir_okay=False))
def show_command(links_file: str) -> None:
    """Show every role with its sessions."""
    manager = _load_manager(links_file, None)
    table = Table(title="Role sessions", show_lines=False)
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Target", style="magenta")
    table.add_column("Start")
    table.add_column("End")

    for name in manager.list_roles():
        sessions = manager.get_sessions(name)
        if not sessions:
            table.add_row(name, "[dim]-[/dim]", "", "")
        for target, start, end in sessions:
            table.add_row(name, target, start, end)

    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    cli()
