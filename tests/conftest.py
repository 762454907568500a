"""
Shared test fixtures and configuration.
"""

import json
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path: Path):
    """Return a factory that lays out a Node.js project in ``tmp_path``.

    Usage:
        root = make_project(deps={"express": "^4.18.2"}, env="PORT=4000")
    """

    def _make(
        deps: dict | None = None,
        dev_deps: dict | None = None,
        main: str | None = None,
        env: str | None = None,
        env_example: str | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        package: dict = {"name": "test-app", "version": "1.0.0"}
        if deps is not None:
            package["dependencies"] = deps
        if dev_deps is not None:
            package["devDependencies"] = dev_deps
        if main is not None:
            package["main"] = main
        (tmp_path / "package.json").write_text(json.dumps(package, indent=2))

        if env is not None:
            (tmp_path / ".env").write_text(textwrap.dedent(env))
        if env_example is not None:
            (tmp_path / ".env.example").write_text(textwrap.dedent(env_example))
        for rel, content in (files or {}).items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return tmp_path

    return _make
