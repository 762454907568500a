"""
Generation models — what the Docker generators are asked to produce
and the user-facing configuration that drives them.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from devenv_bootstrap.core.config.validators import (
    ErrorMessages,
    validate_port,
    validate_volume,
)
from devenv_bootstrap.core.models.environment import EnvironmentConfig


class GenerationConfig(BaseModel):
    """Generator input supplied by the caller.

    Every field is optional.  A field left as ``None`` falls back to the
    matching ``ProjectFacts`` value, then to a fixed default.
    """

    node_version: str | None = None
    port: int | None = None
    has_typescript: bool | None = None
    is_development: bool = False
    environment: EnvironmentConfig | None = None
    volumes: list[str] = Field(default_factory=list)
    networks: list[str] = Field(default_factory=list)


class DockerConfig(BaseModel):
    """User configuration persisted in ``.devenvrc.yml``.

    Attributes:
        mode:         ``development`` or ``production``.
        port:         Application port (1–65535); None means "detect".
        node_version: Tag of the ``node`` base image.
        volumes:      Extra ``source:target`` bind mounts.
        networks:     Extra compose networks.
    """

    mode: Literal["development", "production"] = "production"
    port: int | None = None
    node_version: str = "18-alpine"
    volumes: list[str] = Field(default_factory=list)
    networks: list[str] = Field(default_factory=list)

    @field_validator("mode", mode="before")
    @classmethod
    def _check_mode(cls, value: object) -> object:
        if value not in ("development", "production"):
            raise ValueError(ErrorMessages.VALIDATION.MODE)
        return value

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: int | None) -> int | None:
        if value is not None and not validate_port(value):
            raise ValueError(ErrorMessages.VALIDATION.PORT)
        return value

    @field_validator("volumes")
    @classmethod
    def _check_volumes(cls, value: list[str]) -> list[str]:
        for vol in value:
            if not validate_volume(vol):
                raise ValueError(ErrorMessages.VALIDATION.VOLUME)
        return value

    @property
    def is_development(self) -> bool:
        return self.mode == "development"

    def to_generation_config(
        self,
        environment: EnvironmentConfig | None = None,
        *,
        has_typescript: bool | None = None,
    ) -> GenerationConfig:
        """Build the generator input for this configuration."""
        return GenerationConfig(
            node_version=self.node_version,
            port=self.port,
            has_typescript=has_typescript,
            is_development=self.is_development,
            environment=environment,
            volumes=list(self.volumes),
            networks=list(self.networks),
        )


class GeneratedFile(BaseModel):
    """One rendered Docker file, relative to the project root."""

    path: str
    content: str
    overwrite: bool = True
    reason: str = ""

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())
