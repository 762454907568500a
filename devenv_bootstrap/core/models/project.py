"""
Project models — facts about a Node.js project on disk.

``ProjectFacts`` is what the Express detector learns from
``package.json`` and friends; ``ProjectInfo`` is the broader scan
result used by the ``scan`` command.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from devenv_bootstrap.core.models.environment import EnvironmentConfig


class ProjectFacts(BaseModel):
    """Express.js facts for one project.

    Computed once per invocation and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    has_express: bool = False
    version: str | None = None
    main_file: str | None = None
    port: int | None = None
    middleware: list[str] = Field(default_factory=list)
    has_typescript: bool = False


class ProjectInfo(BaseModel):
    """Result of scanning a project directory."""

    project_type: Literal["express", "unknown"] = "unknown"
    has_package_json: bool = False
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict)
    project_root: str = ""
    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)
