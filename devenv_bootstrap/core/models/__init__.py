"""
Domain models — Pydantic types for devenv-bootstrap.

All models are re-exported here for convenient access:

    from devenv_bootstrap.core.models import ProjectFacts, GenerationConfig
"""

from devenv_bootstrap.core.models.environment import (
    SERVICE_NAMES,
    EnvironmentConfig,
    ServiceDescriptor,
)
from devenv_bootstrap.core.models.generation import (
    DockerConfig,
    GeneratedFile,
    GenerationConfig,
)
from devenv_bootstrap.core.models.project import ProjectFacts, ProjectInfo

__all__ = [
    # environment.py
    "SERVICE_NAMES",
    "EnvironmentConfig",
    "ServiceDescriptor",
    # generation.py
    "DockerConfig",
    "GeneratedFile",
    "GenerationConfig",
    # project.py
    "ProjectFacts",
    "ProjectInfo",
]
