"""
Dockerfile generator — produce a Dockerfile for an Express.js project.

Single build stage named after the generation mode (``development`` or
``production``) so the compose ``build.target`` always resolves.
"""

from __future__ import annotations

import json
import re

from devenv_bootstrap.core.models.generation import GenerationConfig
from devenv_bootstrap.core.models.project import ProjectFacts
from devenv_bootstrap.core.services.generators.common import (
    environment_variables,
    resolve_settings,
)

_NEEDS_QUOTING = re.compile(r"[\s\"'\\]")


# ── Template blocks ─────────────────────────────────────────────


_BASE_BLOCK = """\
FROM node:{node_version} AS {stage}
WORKDIR /app"""

_INSTALL_BLOCK = """\
# Install dependencies
COPY package*.json ./
RUN {install}"""

_SOURCE_BLOCK = """\
# Copy source code
COPY . ."""

_BUILD_BLOCK = """\
# Build TypeScript
RUN npm run build"""

_DEV_DEPS_BLOCK = """\
# For development dependencies
RUN npm install --only=development"""

_SECURITY_BLOCK = """\
# Security (for production)
USER node"""

_RUN_BLOCK = """\
EXPOSE {port}
CMD {cmd}"""


def _env_value(value: str) -> str:
    """Double-quote *value* when a bare ENV word would break on it."""
    if _NEEDS_QUOTING.search(value):
        return json.dumps(value, ensure_ascii=False)
    return value


# ── Public API ──────────────────────────────────────────────────


def generate_dockerfile(
    facts: ProjectFacts,
    config: GenerationConfig | None = None,
) -> str:
    """Generate Dockerfile content.

    Args:
        facts: Project facts from the Express detector.
        config: Caller overrides; fields left unset fall back to *facts*.

    Returns:
        The Dockerfile text, newline-terminated.
    """
    config = config or GenerationConfig()
    settings = resolve_settings(facts, config)

    install = _INSTALL_BLOCK.format(
        install="npm install" if settings.is_development else "npm ci",
    )
    if settings.has_typescript:
        install += "\nCOPY tsconfig.json ./"

    env_lines = [
        f"ENV NODE_ENV={settings.mode}",
        f"ENV PORT={settings.port}",
    ]
    env_lines += [f"ENV {k}={_env_value(v)}" for k, v in environment_variables(config).items()]

    blocks = [
        _BASE_BLOCK.format(node_version=settings.node_version, stage=settings.mode),
        install,
        _SOURCE_BLOCK,
        _BUILD_BLOCK if settings.has_typescript else "",
        "# Environment setup\n" + "\n".join(env_lines),
        _DEV_DEPS_BLOCK if settings.is_development else _SECURITY_BLOCK,
        _RUN_BLOCK.format(
            port=settings.port,
            cmd=json.dumps(settings.start_command),
        ),
    ]

    return "\n\n".join(b for b in blocks if b) + "\n"
