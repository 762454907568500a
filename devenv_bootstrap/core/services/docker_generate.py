"""Docker config generation — analyze a project, render Dockerfile and compose."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

from devenv_bootstrap.core.config.validators import ErrorMessages
from devenv_bootstrap.core.models.generation import (
    DockerConfig,
    GeneratedFile,
    GenerationConfig,
)
from devenv_bootstrap.core.models.project import ProjectFacts
from devenv_bootstrap.core.services.env_analyzer import (
    EnvironmentAnalysisError,
    analyze_environment,
)
from devenv_bootstrap.core.services.express_detect import (
    PACKAGE_JSON,
    ExpressAnalysisError,
    analyze_express,
)
from devenv_bootstrap.core.services.generators.compose import generate_compose
from devenv_bootstrap.core.services.generators.dockerfile import generate_dockerfile

logger = logging.getLogger(__name__)

DOCKERFILE = "Dockerfile"
COMPOSE_FILE = "docker-compose.yml"


def render_docker_files(
    facts: ProjectFacts,
    config: GenerationConfig,
    *,
    overwrite: bool = True,
) -> list[GeneratedFile]:
    """Render both Docker files from already-collected facts."""
    mode = "development" if config.is_development else "production"
    return [
        GeneratedFile(
            path=DOCKERFILE,
            content=generate_dockerfile(facts, config),
            overwrite=overwrite,
            reason=f"Dockerfile for Express.js ({mode})",
        ),
        GeneratedFile(
            path=COMPOSE_FILE,
            content=generate_compose(facts, config),
            overwrite=overwrite,
            reason=f"Compose file for Express.js ({mode})",
        ),
    ]


def generate_docker_files(
    project_root: Path,
    docker_config: DockerConfig | None = None,
    *,
    write: bool = False,
    overwrite: bool = True,
) -> dict:
    """Analyze *project_root* and generate its Dockerfile and compose file.

    Args:
        project_root: Directory containing package.json.
        docker_config: User choices; defaults to ``DockerConfig()``.
        write: Also write the files into *project_root*.
        overwrite: Replace files that already exist (only with *write*).

    Returns:
        {"ok": True, "files": [...], "services": [...], "facts": {...}}
        or {"error": "..."}
    """
    docker_config = docker_config or DockerConfig()

    if not (project_root / PACKAGE_JSON).is_file():
        return {"error": ErrorMessages.PACKAGE_JSON_MISSING}

    try:
        facts = analyze_express(project_root)
        environment = analyze_environment(project_root)
    except (ExpressAnalysisError, EnvironmentAnalysisError) as e:
        logger.error("%s: %s", ErrorMessages.PROJECT_ANALYSIS, e)
        return {"error": f"{ErrorMessages.PROJECT_ANALYSIS}: {e}"}

    gen_config = docker_config.to_generation_config(
        environment,
        has_typescript=facts.has_typescript,
    )
    files = render_docker_files(facts, gen_config, overwrite=overwrite)

    result: dict[str, Any] = {
        "ok": True,
        "files": [f.model_dump() for f in files],
        "services": [s.model_dump() for s in environment.services],
        "facts": facts.model_dump(),
    }
    if not write:
        return result

    written = []
    for f in files:
        outcome = write_generated_file(project_root, f)
        if "error" in outcome:
            return {"error": f"{ErrorMessages.DOCKER_GENERATION}: {outcome['error']}"}
        written.append(outcome)
    result["written"] = written
    return result


def _diff_stats(old: str, new: str) -> dict[str, int]:
    added = removed = 0
    diff = list(difflib.unified_diff(old.splitlines(), new.splitlines(), lineterm="", n=0))
    # First two lines are the ---/+++ file headers
    for line in diff[2:]:
        if line.startswith("@@"):
            continue
        if line.startswith("+"):
            added += 1
        elif line.startswith("-"):
            removed += 1
    return {"lines_added": added, "lines_removed": removed}


def write_generated_file(project_root: Path, generated: GeneratedFile) -> dict:
    """Write *generated* under *project_root*.

    An existing file is kept unless ``generated.overwrite`` is set;
    replacing one reports the changed line counts.

    Returns:
        {"ok": True, "path": "...", "written": True, ...} or {"error": "..."}
    """
    target = project_root / generated.path
    existed = target.is_file()

    if existed and not generated.overwrite:
        return {
            "error": f"{generated.path} already exists (overwrite disabled)",
            "path": generated.path,
            "written": False,
        }

    previous = ""
    if existed:
        try:
            previous = target.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.debug("Cannot read previous %s: %s", target, e)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write %s: %s", target, e)
        return {"error": f"Cannot write {generated.path}: {e}", "path": generated.path, "written": False}

    logger.info("Wrote %s (%d lines)", target, generated.line_count)

    outcome: dict[str, Any] = {"ok": True, "path": generated.path, "written": True}
    if existed:
        outcome["overwritten"] = True
        outcome.update(_diff_stats(previous, generated.content))
    return outcome
