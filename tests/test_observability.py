"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

import pytest

from devenv_bootstrap.core.observability.logging_config import (
    LOG_LEVEL_ENV,
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    @pytest.mark.parametrize("name,expected", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("Warning", logging.WARNING),
        ("ERROR", logging.ERROR),
        (None, logging.WARNING),
        ("", logging.WARNING),
        ("nonsense", logging.WARNING),
    ])
    def test_levels(self, name, expected):
        assert _parse_level(name) == expected


class TestResolveLevel:
    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True, environ={}) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True, environ={}) == "INFO"
        assert resolve_level(quiet=True, environ={LOG_LEVEL_ENV: "DEBUG"}) == "ERROR"

    def test_environment(self):
        assert resolve_level(environ={LOG_LEVEL_ENV: "INFO"}) == "INFO"

    def test_default(self):
        assert resolve_level(environ={}) == "WARNING"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert resolve_level() == "ERROR"


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_replaces_handlers(self):
        setup_logging("WARNING")
        setup_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "deb.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        logging.getLogger("devenv_bootstrap.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text()

    def test_file_level_defaults_to_console(self, tmp_path: Path):
        setup_logging("ERROR", log_file=str(tmp_path / "deb.log"))
        assert logging.getLogger().level == logging.ERROR
