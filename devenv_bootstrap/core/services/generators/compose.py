"""
Compose generator — produce a docker-compose.yml for an Express.js
project and the backing services inferred from its environment.

The ``app`` service is always present.  Each recognized service adds
at most one block per compose key, and ``app.depends_on`` lists the
blocks that were emitted, in first-seen order.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

import yaml

from devenv_bootstrap.core.models.environment import ServiceDescriptor
from devenv_bootstrap.core.models.generation import GenerationConfig
from devenv_bootstrap.core.models.project import ProjectFacts
from devenv_bootstrap.core.services.generators.common import (
    ResolvedSettings,
    environment_variables,
    excluded_for_mode,
    resolve_settings,
)

logger = logging.getLogger(__name__)

COMPOSE_VERSION = "3.8"
DEBUG_PORT = 9229


# ── Service name → compose block ────────────────────────────────

# Canonical name → compose service key.  Database, Elasticsearch and
# Kafka are recognized by the classifier but have no block yet.
SERVICE_KEYS: dict[str, str] = {
    "MongoDB": "mongodb",
    "Redis": "redis",
    "RabbitMQ": "rabbitmq",
}

_SERVICE_TEMPLATES: dict[str, dict[str, Any]] = {
    "mongodb": {
        "image": "mongo:latest",
        "ports": ["27017:27017"],
        "volumes": ["mongodb_data:/data/db"],
    },
    "redis": {
        "image": "redis:alpine",
        "ports": ["6379:6379"],
    },
    "rabbitmq": {
        "image": "rabbitmq:management",
        "ports": ["5672:5672", "15672:15672"],
    },
}

_NAMED_VOLUMES: dict[str, list[str]] = {
    "mongodb": ["mongodb_data"],
}


def _service_key(service: ServiceDescriptor) -> str | None:
    return SERVICE_KEYS.get(service.name)


def _app_service(settings: ResolvedSettings, config: GenerationConfig) -> dict[str, Any]:
    ports = [f"{settings.port}:{settings.port}"]
    if settings.is_development:
        ports.append(f"{DEBUG_PORT}:{DEBUG_PORT}")

    environment = [
        f"NODE_ENV={settings.mode}",
        f"PORT={settings.port}",
    ]
    for key, value in environment_variables(config).items():
        if excluded_for_mode(key, settings.is_development):
            continue
        environment.append(f"{key}={value}")

    app: dict[str, Any] = {
        "build": {"context": ".", "target": settings.mode},
        "ports": ports,
        "environment": environment,
        "volumes": [".:/app", "/app/node_modules", *config.volumes],
        "command": " ".join(settings.start_command),
    }
    if config.networks:
        app["networks"] = list(config.networks)
    return app


# ── Public API ──────────────────────────────────────────────────


def generate_compose(
    facts: ProjectFacts,
    config: GenerationConfig | None = None,
) -> str:
    """Generate docker-compose.yml content.

    Args:
        facts: Project facts from the Express detector.
        config: Caller overrides and the detected environment.

    Returns:
        The compose file as YAML text.
    """
    config = config or GenerationConfig()
    settings = resolve_settings(facts, config)

    app = _app_service(settings, config)
    services: dict[str, Any] = {"app": app}
    named_volumes: list[str] = []
    depends_on: list[str] = []

    descriptors = config.environment.services if config.environment else []
    for svc in descriptors:
        key = _service_key(svc)
        if key is None or key in services:
            continue
        if excluded_for_mode(svc.key or svc.name, settings.is_development):
            logger.debug("Skipping %s (%s) for %s", svc.name, svc.key, settings.mode)
            continue

        services[key] = copy.deepcopy(_SERVICE_TEMPLATES[key])
        named_volumes.extend(v for v in _NAMED_VOLUMES.get(key, []) if v not in named_volumes)
        depends_on.append(key)

    if depends_on:
        app["depends_on"] = depends_on

    compose: dict[str, Any] = {
        "version": COMPOSE_VERSION,
        "services": services,
    }
    if named_volumes:
        compose["volumes"] = {name: {} for name in named_volumes}
    if config.networks:
        compose["networks"] = {name: {} for name in config.networks}

    return yaml.safe_dump(
        compose,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
