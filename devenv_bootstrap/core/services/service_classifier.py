"""
Service classifier — infer backing services from environment variables.

Each variable name is tested against an ordered rule table; the first
matching rule decides the canonical service name and how the value is
turned into a URL.  One descriptor is emitted per matching variable, in
variable order.  Variables that match no rule are ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, NamedTuple

from devenv_bootstrap.core.models.environment import ServiceDescriptor

logger = logging.getLogger(__name__)


OPTIONAL_PREFIX = "OPTIONAL_"

_ROLE_RE = re.compile(r"(PRIMARY|SECONDARY|CACHE|QUEUE|REPLICA)", re.IGNORECASE)
_SCOPE_RE = re.compile(r"^(DEV|PROD|TEST|STAGE)_", re.IGNORECASE)


def _with_scheme(scheme: str) -> Callable[[str], str]:
    """Build a normalizer that prefixes *scheme* when the value has none."""

    def normalize(value: str) -> str:
        if "://" in value:
            return value
        return f"{scheme}://{value}"

    return normalize


class ServiceRule(NamedTuple):
    """One row of the classification table."""

    name: str
    pattern: re.Pattern[str]
    normalize: Callable[[str], str] | None = None


# ── Rule table (priority order, first match wins) ───────────────────

SERVICE_RULES: tuple[ServiceRule, ...] = (
    ServiceRule(
        "MongoDB",
        re.compile(r"MONGO(DB)?_.*(URI|URL|HOST|PRIMARY|SECONDARY|REPLICA)", re.IGNORECASE),
        _with_scheme("mongodb"),
    ),
    ServiceRule(
        "Database",
        re.compile(r"(POSTGRES(QL)?|DATABASE)_.*(URI|URL|HOST|PRIMARY|SECONDARY)", re.IGNORECASE),
        _with_scheme("postgresql"),
    ),
    ServiceRule(
        "Redis",
        re.compile(r"REDIS_.*(URI|URL|HOST|CACHE|QUEUE)", re.IGNORECASE),
        _with_scheme("redis"),
    ),
    ServiceRule(
        "RabbitMQ",
        re.compile(r"RABBITMQ_.*(URI|URL|HOST)", re.IGNORECASE),
        _with_scheme("amqp"),
    ),
    ServiceRule(
        "Elasticsearch",
        re.compile(r"ELASTIC(SEARCH)?_.*(URI|URL|HOST)", re.IGNORECASE),
        _with_scheme("http"),
    ),
    ServiceRule(
        "Kafka",
        re.compile(r"KAFKA_.*(BROKERS|URI|URL|HOST)", re.IGNORECASE),
    ),
)


def match_rule(service_key: str) -> ServiceRule | None:
    """Return the first rule whose pattern occurs in *service_key*."""
    for rule in SERVICE_RULES:
        if rule.pattern.search(service_key):
            return rule
    return None


def classify_variable(key: str, value: str) -> ServiceDescriptor | None:
    """Classify a single variable, or return None if no rule matches."""
    is_optional = key.startswith(OPTIONAL_PREFIX)
    service_key = key[len(OPTIONAL_PREFIX):] if is_optional else key

    rule = match_rule(service_key)
    if rule is None:
        return None

    role_m = _ROLE_RE.search(service_key)
    scope_m = _SCOPE_RE.match(service_key)

    url = rule.normalize(value) if rule.normalize else value

    return ServiceDescriptor(
        name=rule.name,
        url=url,
        required=not is_optional,
        key=key,
        role=role_m.group(1).upper() if role_m else None,
        scope=scope_m.group(1).upper() if scope_m else None,
    )


def classify_services(variables: dict[str, str]) -> list[ServiceDescriptor]:
    """Infer backing services from parsed environment variables.

    Args:
        variables: Ordered key → value mapping (see ``parse_env``).

    Returns:
        One ``ServiceDescriptor`` per matching variable, in variable order.
        Distinct variables that match the same rule are never merged.
    """
    services: list[ServiceDescriptor] = []
    for key, value in variables.items():
        svc = classify_variable(key, value)
        if svc is None:
            continue
        logger.debug("Classified %s as %s (required=%s)", key, svc.name, svc.required)
        services.append(svc)

    logger.debug("Detected %d service(s) from %d variable(s)", len(services), len(variables))
    return services
