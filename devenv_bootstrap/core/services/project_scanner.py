"""
Project scanner — classify a directory and summarize what it contains.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devenv_bootstrap.core.models.environment import EnvironmentConfig
from devenv_bootstrap.core.models.project import ProjectInfo
from devenv_bootstrap.core.services.env_analyzer import (
    EnvironmentAnalysisError,
    analyze_environment,
)
from devenv_bootstrap.core.services.express_detect import (
    PACKAGE_JSON,
    ExpressAnalysisError,
    load_package_json,
)

logger = logging.getLogger(__name__)


def _section(package: dict, name: str) -> dict[str, str]:
    value = package.get(name)
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def scan_project(project_path: Path | str) -> ProjectInfo:
    """Scan *project_path* and report its type, dependencies and environment.

    Never raises for analysis problems: an unreadable environment yields
    an empty ``EnvironmentConfig`` and an invalid package.json yields
    empty dependency maps.  Both are logged.
    """
    root = Path(project_path).resolve()

    try:
        environment = analyze_environment(root)
    except EnvironmentAnalysisError as e:
        logger.error("Environment analysis failed: %s", e)
        environment = EnvironmentConfig()

    info = ProjectInfo(project_root=str(root), environment=environment)
    if not (root / PACKAGE_JSON).is_file():
        return info

    info.has_package_json = True
    try:
        package = load_package_json(root) or {}
    except ExpressAnalysisError as e:
        logger.error("Failed to read %s: %s", PACKAGE_JSON, e)
        package = {}

    info.dependencies = _section(package, "dependencies")
    info.dev_dependencies = _section(package, "devDependencies")
    info.project_type = "express" if "express" in info.dependencies else "unknown"

    logger.info("Scanned %s: %s project", root, info.project_type)
    return info
