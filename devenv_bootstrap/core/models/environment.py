"""
Environment model — variables read from ``.env`` and the backing
services inferred from them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# Canonical service vocabulary, in classifier priority order
SERVICE_NAMES: tuple[str, ...] = (
    "MongoDB",
    "Database",
    "Redis",
    "RabbitMQ",
    "Elasticsearch",
    "Kafka",
)


class ServiceDescriptor(BaseModel):
    """A backing service inferred from one environment variable.

    Attributes:
        name:     Canonical service name (see ``SERVICE_NAMES``).
        url:      Variable value, scheme-prefixed when the rule has one.
        required: False iff the variable carried the ``OPTIONAL_`` prefix.
        key:      The originating variable name, prefix included.
        role:     PRIMARY / SECONDARY / CACHE / QUEUE / REPLICA, if present.
        scope:    DEV / PROD / TEST / STAGE, if the key was scoped.
    """

    name: str
    url: str | None = None
    required: bool = True
    key: str = ""
    role: str | None = None
    scope: str | None = None


class EnvironmentConfig(BaseModel):
    """Everything learned from a project's environment files."""

    variables: dict[str, str] = Field(default_factory=dict)
    has_env_file: bool = False
    services: list[ServiceDescriptor] = Field(default_factory=list)
