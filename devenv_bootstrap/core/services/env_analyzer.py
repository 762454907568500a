"""
Environment analysis — read a project's .env files and infer services.

Reads ``.env`` (variables + services) and ``.env.example`` (extra
services only).  Parsing and classification are delegated to the pure
``env_parser`` and ``service_classifier`` modules.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devenv_bootstrap.core.config.validators import ErrorMessages
from devenv_bootstrap.core.models.environment import EnvironmentConfig
from devenv_bootstrap.core.services.env_parser import parse_env
from devenv_bootstrap.core.services.service_classifier import classify_services

logger = logging.getLogger(__name__)

ENV_FILE = ".env"
ENV_EXAMPLE_FILE = ".env.example"


class EnvironmentAnalysisError(Exception):
    """Raised when the environment file exists but cannot be read."""


def analyze_environment(project_root: Path) -> EnvironmentConfig:
    """Analyze the environment files in *project_root*.

    Returns:
        EnvironmentConfig with variables from ``.env`` and services from
        both ``.env`` and ``.env.example``.  Example services are only
        added when no service of the same name was found in ``.env``.

    Raises:
        EnvironmentAnalysisError: If ``.env`` is not readable.
    """
    result = EnvironmentConfig()

    env_path = project_root / ENV_FILE
    if env_path.is_file():
        result.has_env_file = True
        try:
            content = env_path.read_text(encoding="utf-8")
        except PermissionError as e:
            raise EnvironmentAnalysisError(ErrorMessages.ENV_PERMISSION) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", env_path, e)
            result.has_env_file = False
        else:
            result.variables = parse_env(content)
            result.services = classify_services(result.variables)

    example_path = project_root / ENV_EXAMPLE_FILE
    if example_path.is_file():
        try:
            example_vars = parse_env(example_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable %s: %s", example_path, e)
        else:
            existing = {s.name for s in result.services}
            extra = [s for s in classify_services(example_vars) if s.name not in existing]
            if extra:
                logger.debug("Added %d service(s) from %s", len(extra), ENV_EXAMPLE_FILE)
            result.services.extend(extra)

    logger.info(
        "Environment: %d variable(s), %d service(s)",
        len(result.variables),
        len(result.services),
    )
    return result
