"""
CLI commands for Express.js projects.

Thin wrappers over ``devenv_bootstrap.core.services``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from devenv_bootstrap.core.config.validators import ErrorMessages


def _require_package_json(root: Path) -> None:
    if not (root / "package.json").is_file():
        click.secho(f"❌ {ErrorMessages.PACKAGE_JSON_MISSING}", fg="red")
        sys.exit(1)


def _fail_invalid(errors: list[str]) -> None:
    click.secho(f"❌ {ErrorMessages.CONFIG_INVALID}", fg="red", bold=True)
    for err in errors:
        click.echo(f"- {err}")
    sys.exit(1)


@click.group()
def express() -> None:
    """Express.js project commands — analyze, generate."""


# ── Analyze ─────────────────────────────────────────────────────


@express.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def analyze(directory: str, as_json: bool) -> None:
    """Analyze an Express.js project."""
    from devenv_bootstrap.core.services.express_detect import (
        ExpressAnalysisError,
        analyze_express,
    )

    root = Path(directory)
    _require_package_json(root)

    try:
        facts = analyze_express(root)
    except ExpressAnalysisError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(facts.model_dump(), indent=2))
        return

    click.secho("\n🚂 Express.js Project Analysis", fg="cyan", bold=True)
    click.echo(f"   Express version: {facts.version or 'Not detected'}")
    click.echo(f"   Main file:       {facts.main_file}")
    click.echo(f"   Port:            {facts.port or 'Not detected'}")
    click.echo(f"   TypeScript:      {'Yes' if facts.has_typescript else 'No'}")
    middleware = ", ".join(facts.middleware) if facts.middleware else "None detected"
    click.echo(f"   Middleware:      {middleware}")
    click.echo()


# ── Generate ────────────────────────────────────────────────────


@express.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False))
@click.option("--dev", "-d", is_flag=True, help="Generate development configuration.")
@click.option("--port", "-p", default=None, help="Override port number.")
@click.option("--node-version", default=None, help="Node.js image tag (e.g. 20-alpine).")
@click.option("--interactive", "-i", is_flag=True, help="Prompt for every setting.")
def generate(
    directory: str,
    dev: bool,
    port: str | None,
    node_version: str | None,
    interactive: bool,
) -> None:
    """Generate Dockerfile and docker-compose.yml."""
    from devenv_bootstrap.core.config.loader import (
        CONFIG_FILE,
        ConfigError,
        load_config,
        prompt_config,
        save_config,
    )
    from devenv_bootstrap.core.config.validators import validate_docker_config
    from devenv_bootstrap.core.models.generation import DockerConfig
    from devenv_bootstrap.core.services.docker_generate import generate_docker_files

    root = Path(directory)

    # ── Configuration ───────────────────────────────────────────
    if interactive:
        try:
            config = prompt_config(load_config(root))
        except ConfigError as e:
            click.secho(f"❌ Configuration error: {e}", fg="red")
            sys.exit(1)
    else:
        parsed_port: int | None = None
        if port is not None:
            try:
                parsed_port = int(port)
            except ValueError:
                _fail_invalid([ErrorMessages.VALIDATION.PORT])

        data = {
            "mode": "development" if dev else "production",
            "port": parsed_port,
            "node_version": node_version or "18-alpine",
        }
        errors = validate_docker_config(data)
        if errors:
            _fail_invalid(errors)
        config = DockerConfig.model_validate(data)

    _require_package_json(root)

    # ── Generate + write ────────────────────────────────────────
    result = generate_docker_files(root, config, write=True, overwrite=True)
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if interactive:
        try:
            save_config(root, config)
        except ConfigError as e:
            click.secho(f"⚠️  {e}", fg="yellow")

    click.secho("✅ Generated Docker configuration files:", fg="green", bold=True)
    for f in result["files"]:
        click.echo(f"- {f['path']}")
    if interactive:
        click.echo(f"- {CONFIG_FILE} (configuration file)")

    services = result["services"]
    if services:
        click.echo()
        click.secho("Detected services:", fg="cyan")
        for svc in services:
            label = "Required" if svc["required"] else "Optional"
            click.echo(f"- {svc['name']} ({label})")
