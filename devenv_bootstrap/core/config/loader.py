"""
Configuration loader — reads and writes ``.devenvrc.yml``.

The file stores the user's Docker generation choices (mode, port,
Node.js version, extra volumes and networks) so that later runs of
``deb express generate --interactive`` start from them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from devenv_bootstrap.core.config.validators import (
    ErrorMessages,
    validate_docker_config,
)
from devenv_bootstrap.core.models.generation import DockerConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = ".devenvrc.yml"


class ConfigError(Exception):
    """Raised when the user configuration is invalid or cannot be saved."""


def config_path(project_dir: Path) -> Path:
    """Path of the config file for *project_dir*."""
    return project_dir / CONFIG_FILE


def load_config(project_dir: Path) -> DockerConfig | None:
    """Load the saved configuration for a project.

    Returns:
        Validated DockerConfig, or None if no config file exists.

    Raises:
        ConfigError: If the file is unreadable or invalid.
    """
    path = config_path(project_dir)
    if not path.is_file():
        return None

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"{ErrorMessages.CONFIG_LOAD}: {e}") from e

    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = DockerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{ErrorMessages.CONFIG_INVALID} {e}") from e

    logger.info("Loaded config: mode=%s port=%s", config.mode, config.port)
    return config


def save_config(project_dir: Path, config: DockerConfig) -> Path:
    """Write *config* to the project's config file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    path = config_path(project_dir)
    content = yaml.safe_dump(
        config.model_dump(),
        default_flow_style=False,
        sort_keys=False,
    )
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"{ErrorMessages.CONFIG_SAVE}: {e}") from e

    logger.info("Saved config to %s", path)
    return path


def prompt_config(defaults: DockerConfig | None = None) -> DockerConfig:
    """Ask the user for each setting, offering *defaults* as answers.

    Raises:
        ConfigError: If the answers do not form a valid configuration.
    """
    defaults = defaults or DockerConfig()

    mode = click.prompt(
        "Environment mode",
        type=click.Choice(["development", "production"]),
        default=defaults.mode,
    )
    port = click.prompt("Application port", type=int, default=defaults.port or 3000)
    node_version = click.prompt("Node.js version", default=defaults.node_version)
    volumes_raw = click.prompt(
        "Extra volumes (comma-separated source:target)",
        default=",".join(defaults.volumes),
        show_default=False,
    )
    volumes = [v.strip() for v in volumes_raw.split(",") if v.strip()]

    data = {
        "mode": mode,
        "port": port,
        "node_version": node_version,
        "volumes": volumes,
        "networks": list(defaults.networks),
    }
    errors = validate_docker_config(data)
    if errors:
        raise ConfigError(f"{ErrorMessages.CONFIG_INVALID} " + "; ".join(errors))

    return DockerConfig.model_validate(data)
