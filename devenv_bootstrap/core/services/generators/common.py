"""
Shared helpers for the Dockerfile and compose generators.

Settings resolution order for every field:
    GenerationConfig  >  ProjectFacts  >  fixed default
"""

from __future__ import annotations

from typing import NamedTuple

from devenv_bootstrap.core.models.generation import GenerationConfig
from devenv_bootstrap.core.models.project import ProjectFacts
from devenv_bootstrap.core.services.service_classifier import OPTIONAL_PREFIX

DEFAULT_NODE_VERSION = "18-alpine"
DEFAULT_PORT = 3000

_INVALID_URL = ":invalid:url:"
_INVALID_URL_REPLACEMENT = "invalid-value"


class ResolvedSettings(NamedTuple):
    node_version: str
    port: int
    has_typescript: bool
    is_development: bool

    @property
    def mode(self) -> str:
        return "development" if self.is_development else "production"

    @property
    def start_command(self) -> list[str]:
        if self.is_development:
            return ["npm", "run", "dev"]
        return ["npm", "start"]


def resolve_settings(facts: ProjectFacts, config: GenerationConfig) -> ResolvedSettings:
    """Merge generator config with project facts and defaults."""
    if config.has_typescript is not None:
        has_typescript = config.has_typescript
    else:
        has_typescript = facts.has_typescript

    return ResolvedSettings(
        node_version=config.node_version or DEFAULT_NODE_VERSION,
        port=config.port or facts.port or DEFAULT_PORT,
        has_typescript=has_typescript,
        is_development=config.is_development,
    )


def sanitize_value(value: str | None) -> str:
    """Replace the ``:invalid:url:`` placeholder with ``invalid-value``."""
    if value is None:
        return ""
    return value.replace(_INVALID_URL, _INVALID_URL_REPLACEMENT)


def excluded_for_mode(key: str, is_development: bool) -> bool:
    """True if *key* is scoped to the other mode.

    ``dev_*`` keys only apply when developing, ``prod_*`` keys only in
    production.  Unprefixed keys always apply.  A leading ``OPTIONAL_``
    is ignored, so ``OPTIONAL_DEV_*`` is still a development key.
    """
    lowered = key.lower()
    optional = OPTIONAL_PREFIX.lower()
    if lowered.startswith(optional):
        lowered = lowered[len(optional):]
    if lowered.startswith("dev_"):
        return not is_development
    if lowered.startswith("prod_"):
        return is_development
    return False


def environment_variables(config: GenerationConfig) -> dict[str, str]:
    """Return the sanitized user variables, empty when none were given."""
    if config.environment is None:
        return {}
    return {k: sanitize_value(v) for k, v in config.environment.variables.items()}
