"""
Express.js detection — project facts from package.json, .env and the
main entry file.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from devenv_bootstrap.core.models.project import ProjectFacts

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
DEFAULT_MAIN_FILE = "index.js"

# Middleware packages worth reporting, in display order
COMMON_MIDDLEWARE: tuple[str, ...] = (
    "body-parser",
    "cors",
    "helmet",
    "morgan",
    "compression",
    "express-session",
)

_ENV_PORT_RE = re.compile(r"^[ \t]*PORT[ \t]*=[ \t]*(\d+)", re.MULTILINE)
_LISTEN_PORT_RE = re.compile(r"\.listen\(\s*(\d+)")


class ExpressAnalysisError(Exception):
    """Raised when package.json exists but cannot be understood."""


def _read_text(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None


def load_package_json(project_root: Path) -> dict | None:
    """Read and decode package.json.

    Returns:
        The decoded mapping, or None if the file does not exist.

    Raises:
        ExpressAnalysisError: If the file is unreadable or not a JSON object.
    """
    path = project_root / PACKAGE_JSON
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ExpressAnalysisError(f"Express analysis failed: {e}") from e
    if not isinstance(data, dict):
        raise ExpressAnalysisError(
            f"Express analysis failed: expected a JSON object in {path}, "
            f"got {type(data).__name__}"
        )
    return data


def all_dependencies(package: dict) -> dict[str, str]:
    """Merge dependencies and devDependencies (dev wins on conflict)."""
    deps: dict[str, str] = {}
    for section in ("dependencies", "devDependencies"):
        value = package.get(section)
        if isinstance(value, dict):
            deps.update({str(k): str(v) for k, v in value.items()})
    return deps


def detect_port(project_root: Path, main_file: str | None) -> int | None:
    """Find the app port in .env, then in the main file's ``.listen(...)``."""
    env_content = _read_text(project_root / ".env")
    if env_content:
        m = _ENV_PORT_RE.search(env_content)
        if m:
            return int(m.group(1))

    if main_file:
        main_content = _read_text(project_root / main_file)
        if main_content:
            m = _LISTEN_PORT_RE.search(main_content)
            if m:
                return int(m.group(1))

    return None


def detect_middleware(deps: dict[str, str]) -> list[str]:
    """Return the common middleware packages present in *deps*."""
    return [mw for mw in COMMON_MIDDLEWARE if mw in deps]


def analyze_express(project_root: Path) -> ProjectFacts:
    """Collect Express.js facts for *project_root*.

    A project without package.json yields all-default facts.

    Raises:
        ExpressAnalysisError: If package.json is present but invalid.
    """
    package = load_package_json(project_root)
    if package is None:
        logger.info("No %s in %s", PACKAGE_JSON, project_root)
        return ProjectFacts()

    deps = all_dependencies(package)
    main_file = package.get("main")
    if not isinstance(main_file, str) or not main_file:
        main_file = DEFAULT_MAIN_FILE

    facts = ProjectFacts(
        has_express="express" in deps,
        version=deps.get("express"),
        main_file=main_file,
        port=detect_port(project_root, main_file),
        middleware=detect_middleware(deps),
        has_typescript="typescript" in deps,
    )
    logger.info(
        "Express: %s (version=%s, port=%s, typescript=%s)",
        facts.has_express, facts.version, facts.port, facts.has_typescript,
    )
    return facts
