"""
devenv-bootstrap — CLI entrypoint.

Usage:
    python -m devenv_bootstrap.main --help
    deb scan .
    deb express analyze .
    deb express generate . --dev
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from devenv_bootstrap import __version__
from devenv_bootstrap.core.observability.logging_config import configure_from_cli


@click.group()
@click.version_option(version=__version__, prog_name="deb")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """Development environment bootstrapping — Docker configs for Express.js."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    configure_from_cli(debug=debug, verbose=verbose, quiet=quiet)


@cli.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def scan(ctx: click.Context, directory: str, as_json: bool) -> None:
    """Scan a directory: project type, dependencies, environment."""
    from devenv_bootstrap.core.services.project_scanner import scan_project

    root = Path(directory)
    if not root.is_dir():
        click.secho(f"❌ Directory not found: {directory}", fg="red")
        sys.exit(1)

    info = scan_project(root)

    if as_json:
        click.echo(json.dumps(info.model_dump(), indent=2))
        return

    quiet = ctx.obj.get("quiet", False)
    if not quiet:
        click.secho(f"\n🔍 Scan: {info.project_root}", fg="cyan", bold=True)

    click.echo(f"   Project type: {info.project_type}")
    click.echo(f"   package.json: {'yes' if info.has_package_json else 'no'}")

    if info.has_package_json:
        click.echo(f"   Dependencies: {len(info.dependencies)}")
        for name, version in info.dependencies.items():
            click.echo(f"     • {name} {version}")
        click.echo(f"   Dev dependencies: {len(info.dev_dependencies)}")

    env = info.environment
    click.echo(f"   .env file: {'yes' if env.has_env_file else 'no'}")
    click.echo(f"   Variables: {len(env.variables)}")
    if env.services:
        click.secho("   Services:", fg="white", bold=True)
        for svc in env.services:
            label = "Required" if svc.required else "Optional"
            click.echo(f"     • {svc.name} ({label})  ← {svc.key}")

    click.echo()


from devenv_bootstrap.ui.cli.express import express  # noqa: E402

cli.add_command(express)


if __name__ == "__main__":
    cli()
