"""
Configuration validation — checks and user-facing messages.

Validates ``DockerConfig`` values to catch misconfigurations early with
clear, actionable error messages.  Used by the pydantic model and by
the CLI before any generation step.
"""

from __future__ import annotations

import re


# ── Volume mount: source:target[:mode] ──────────────────────────────
_VOLUME_RE = re.compile(r"^[^:\s]+:[^:\s]+(:(ro|rw))?$")


class ErrorMessages:
    """User-facing error strings."""

    CONFIG_LOAD = "Failed to load configuration file"
    CONFIG_SAVE = "Failed to save configuration file"
    CONFIG_INVALID = "Invalid configuration:"
    DOCKER_GENERATION = "Failed to generate Docker configuration"
    PROJECT_ANALYSIS = "Failed to analyze project"
    PACKAGE_JSON_MISSING = "package.json not found"
    ENV_PERMISSION = "Permission denied when reading .env file"

    class VALIDATION:
        PORT = "Invalid port number. Must be between 1 and 65535"
        VOLUME = "Invalid volume mount syntax. Use format: source:target"
        MODE = 'Invalid mode. Must be either "development" or "production"'


def validate_port(port: object) -> bool:
    """True if *port* is an integer in 1–65535."""
    if isinstance(port, bool) or not isinstance(port, int):
        return False
    return 1 <= port <= 65535


def validate_volume(volume: str) -> bool:
    """True if *volume* looks like ``source:target``."""
    return bool(_VOLUME_RE.match(volume or ""))


def validate_docker_config(data: dict) -> list[str]:
    """Validate a raw config dict.

    Returns:
        List of error messages (empty when valid).
    """
    errors: list[str] = []

    mode = data.get("mode", "production")
    if mode not in ("development", "production"):
        errors.append(ErrorMessages.VALIDATION.MODE)

    port = data.get("port")
    if port is not None and not validate_port(port):
        errors.append(ErrorMessages.VALIDATION.PORT)

    volumes = data.get("volumes") or []
    if isinstance(volumes, str):
        volumes = [v.strip() for v in volumes.split(",") if v.strip()]
    if any(not validate_volume(v) for v in volumes):
        errors.append(ErrorMessages.VALIDATION.VOLUME)

    node_version = data.get("node_version", "18-alpine")
    if not isinstance(node_version, str) or not node_version.strip():
        errors.append("Invalid Node.js version. Must be a non-empty image tag")

    return errors
